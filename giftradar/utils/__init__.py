# coding=utf-8
"""
Utility Module - Common Helper Functions
"""

from giftradar.utils.time import (
    as_aware,
    get_configured_time,
    parse_publish_date,
    format_month,
)
from giftradar.utils.errors import (
    GiftRadarError,
    InvalidParameterError,
    DataNotFoundError,
)

__all__ = [
    "as_aware",
    "get_configured_time",
    "parse_publish_date",
    "format_month",
    "GiftRadarError",
    "InvalidParameterError",
    "DataNotFoundError",
]
