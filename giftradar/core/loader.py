# coding=utf-8
"""
Config Loader Module

Responsible for loading configuration from YAML files and environment variables.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from giftradar.core.categories import GIFT_CATEGORIES
from giftradar.core.classifier import DEFAULT_SAMPLE_LIMIT, DEFAULT_TREND_CONFIG
from giftradar.core.scorer import DEFAULT_WEIGHT_CONFIG
from giftradar.core.synonyms import SYNONYM_GROUPS

logger = logging.getLogger(__name__)


def _get_env_int(key: str, default: int = 0) -> int:
    """Get integer value from environment variable"""
    value = os.environ.get(key, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_env_str(key: str, default: str = "") -> str:
    """Get string value from environment variable"""
    return os.environ.get(key, "").strip() or default


def _load_app_config(config_data: Dict) -> Dict:
    """Load App Config"""
    app_config = config_data.get("app", {}) or {}
    return {
        "TIMEZONE": _get_env_str("TIMEZONE") or app_config.get("timezone", "UTC"),
        "DATA_PATH": _get_env_str("DATA_PATH") or app_config.get("data_path", "data/articles.json"),
    }


def _load_weight_config(config_data: Dict) -> Dict:
    """Load Weight Config"""
    weight = config_data.get("weight", {}) or {}
    return {
        "TITLE_WEIGHT": weight.get("title_weight", DEFAULT_WEIGHT_CONFIG["TITLE_WEIGHT"]),
        "SUMMARY_WEIGHT": weight.get("summary_weight", DEFAULT_WEIGHT_CONFIG["SUMMARY_WEIGHT"]),
        "EXACT_KEYWORD_WEIGHT": weight.get("exact_keyword_weight", DEFAULT_WEIGHT_CONFIG["EXACT_KEYWORD_WEIGHT"]),
        "PARTIAL_KEYWORD_WEIGHT": weight.get("partial_keyword_weight", DEFAULT_WEIGHT_CONFIG["PARTIAL_KEYWORD_WEIGHT"]),
    }


def _load_trend_config(config_data: Dict) -> Dict:
    """Load Trend Score Config"""
    trend = config_data.get("trend", {}) or {}
    return {
        "FLOOR": trend.get("floor", DEFAULT_TREND_CONFIG["FLOOR"]),
        "CAP": trend.get("cap", DEFAULT_TREND_CONFIG["CAP"]),
        "SHARE_MULTIPLIER": trend.get("share_multiplier", DEFAULT_TREND_CONFIG["SHARE_MULTIPLIER"]),
        "COUNT_WEIGHT": trend.get("count_weight", DEFAULT_TREND_CONFIG["COUNT_WEIGHT"]),
        "HIGH_THRESHOLD": trend.get("high_threshold", DEFAULT_TREND_CONFIG["HIGH_THRESHOLD"]),
        "MEDIUM_THRESHOLD": trend.get("medium_threshold", DEFAULT_TREND_CONFIG["MEDIUM_THRESHOLD"]),
    }


def _load_categories_config(config_data: Dict) -> List[Dict]:
    """Load Category Definitions (built-in gift categories when absent)"""
    categories = config_data.get("categories")
    if not categories:
        return GIFT_CATEGORIES

    valid = []
    for entry in categories:
        if not isinstance(entry, dict) or not entry.get("name") or not entry.get("keywords"):
            logger.warning("Skipping invalid category entry: %s", entry)
            continue
        valid.append(entry)
    return valid


def _load_synonyms_config(config_data: Dict) -> Dict[str, List[str]]:
    """
    Load Synonym Groups

    synonyms.groups adds or replaces groups of the built-in table;
    synonyms.replace: true drops the built-in table entirely.
    """
    synonyms = config_data.get("synonyms", {}) or {}
    groups = synonyms.get("groups", {}) or {}
    base = {} if synonyms.get("replace", False) else dict(SYNONYM_GROUPS)
    base.update({str(k): list(v or []) for k, v in groups.items()})
    return base


def _load_server_config(config_data: Dict) -> Dict:
    """Load API Server Config"""
    server = config_data.get("server", {}) or {}
    return {
        "HOST": _get_env_str("SERVER_HOST") or server.get("host", "127.0.0.1"),
        "PORT": _get_env_int("SERVER_PORT") or server.get("port", 5000),
    }


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load Configuration

    Args:
        config_path: Path to config file, defaults to CONFIG_PATH env var or config/config.yaml

    Returns:
        Dict containing all configurations

    Raises:
        FileNotFoundError: Config file not found
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file {config_path} not found")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    logger.info("Config file loaded: %s", config_path)

    config = {}

    # App Config
    config.update(_load_app_config(config_data))

    # Scoring Config
    config["WEIGHT_CONFIG"] = _load_weight_config(config_data)
    config["TREND_CONFIG"] = _load_trend_config(config_data)
    report = config_data.get("report", {}) or {}
    config["SAMPLE_LIMIT"] = _get_env_int("SAMPLE_LIMIT") or report.get("sample_limit", DEFAULT_SAMPLE_LIMIT)

    # Classification Config
    config["CATEGORIES"] = _load_categories_config(config_data)
    config["SYNONYMS"] = _load_synonyms_config(config_data)

    # Server Config
    config["SERVER"] = _load_server_config(config_data)

    return config


def default_config() -> Dict[str, Any]:
    """Configuration used when no config file exists (built-in defaults plus env overrides)"""
    return {
        **_load_app_config({}),
        "WEIGHT_CONFIG": dict(DEFAULT_WEIGHT_CONFIG),
        "TREND_CONFIG": dict(DEFAULT_TREND_CONFIG),
        "SAMPLE_LIMIT": _get_env_int("SAMPLE_LIMIT") or DEFAULT_SAMPLE_LIMIT,
        "CATEGORIES": GIFT_CATEGORIES,
        "SYNONYMS": dict(SYNONYM_GROUPS),
        "SERVER": _load_server_config({}),
    }
