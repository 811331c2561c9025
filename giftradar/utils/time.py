# coding=utf-8
"""
Time Utility Module - Unified time processing functions
"""

import logging
from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

# Default timezone
DEFAULT_TIMEZONE = "UTC"


def get_configured_time(timezone: str = DEFAULT_TIMEZONE) -> datetime:
    """
    Get current time for the configured timezone

    Args:
        timezone: Timezone name, e.g., 'Asia/Kolkata', 'America/New_York'

    Returns:
        Current time with timezone information
    """
    try:
        tz = pytz.timezone(timezone)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown timezone '%s', using default %s", timezone, DEFAULT_TIMEZONE)
        tz = pytz.timezone(DEFAULT_TIMEZONE)
    return datetime.now(tz)


def parse_publish_date(value: Optional[str], timezone: str = DEFAULT_TIMEZONE) -> Optional[datetime]:
    """
    Parse a publish date in any common format

    Args:
        value: Raw date string, e.g. '2025-03-04', 'Published March 4, 2025'
        timezone: Timezone applied to naive values

    Returns:
        Timezone-aware datetime, or None when empty or unparsable
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.lower().startswith("published"):
        text = text[len("published"):].strip(" :")
    if not text:
        return None

    try:
        parsed = date_parser.parse(text)
    except (ValueError, OverflowError):
        logger.warning("Failed to parse date: %s", value)
        return None

    if parsed.tzinfo is None:
        try:
            tz = pytz.timezone(timezone)
        except pytz.UnknownTimeZoneError:
            tz = pytz.utc
        parsed = tz.localize(parsed)
    return parsed


def format_month(value: datetime) -> str:
    """Month bucket of a datetime, e.g. '2025-03'"""
    return value.strftime("%Y-%m")


def as_aware(value: datetime) -> datetime:
    """Treat a naive datetime as UTC so it compares with aware ones"""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value
