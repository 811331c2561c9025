import pytest

from giftradar.core.categories import GIFT_CATEGORIES
from giftradar.core.loader import default_config, load_config
from giftradar.core.synonyms import SYNONYM_GROUPS

ENV_KEYS = ("CONFIG_PATH", "TIMEZONE", "DATA_PATH", "SAMPLE_LIMIT", "SERVER_HOST", "SERVER_PORT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_config(tmp_path):
    def _write(text):
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_empty_config_uses_defaults(write_config):
    config = load_config(write_config(""))

    assert config["TIMEZONE"] == "UTC"
    assert config["DATA_PATH"] == "data/articles.json"
    assert config["WEIGHT_CONFIG"]["TITLE_WEIGHT"] == 10
    assert config["TREND_CONFIG"]["FLOOR"] == 20
    assert config["SAMPLE_LIMIT"] == 5
    assert config["CATEGORIES"] == GIFT_CATEGORIES
    assert config["SYNONYMS"] == SYNONYM_GROUPS
    assert config["SERVER"] == {"HOST": "127.0.0.1", "PORT": 5000}


def test_sections_are_read(write_config):
    config = load_config(write_config("""
app:
  timezone: "Asia/Kolkata"
  data_path: "other.json"
weight:
  title_weight: 12
trend:
  high_threshold: 80
report:
  sample_limit: 3
server:
  port: 8080
"""))

    assert config["TIMEZONE"] == "Asia/Kolkata"
    assert config["DATA_PATH"] == "other.json"
    assert config["WEIGHT_CONFIG"]["TITLE_WEIGHT"] == 12
    assert config["WEIGHT_CONFIG"]["SUMMARY_WEIGHT"] == 5
    assert config["TREND_CONFIG"]["HIGH_THRESHOLD"] == 80
    assert config["SAMPLE_LIMIT"] == 3
    assert config["SERVER"]["PORT"] == 8080


def test_env_overrides(write_config, monkeypatch):
    path = write_config("app:\n  timezone: Asia/Kolkata\nreport:\n  sample_limit: 3\n")
    monkeypatch.setenv("TIMEZONE", "America/New_York")
    monkeypatch.setenv("SAMPLE_LIMIT", "7")
    monkeypatch.setenv("SERVER_PORT", "not-a-number")

    config = load_config(path)

    assert config["TIMEZONE"] == "America/New_York"
    assert config["SAMPLE_LIMIT"] == 7
    assert config["SERVER"]["PORT"] == 5000


def test_config_path_from_env(write_config, monkeypatch):
    monkeypatch.setenv("CONFIG_PATH", write_config("app:\n  data_path: env.json\n"))

    assert load_config()["DATA_PATH"] == "env.json"


def test_invalid_categories_are_skipped(write_config):
    config = load_config(write_config("""
categories:
  - name: "Mugs"
    keywords: ["mug", "cup"]
  - name: "No terms"
  - just a string
"""))

    assert config["CATEGORIES"] == [{"name": "Mugs", "keywords": ["mug", "cup"]}]


def test_synonym_groups_merge_with_builtins(write_config):
    config = load_config(write_config("""
synonyms:
  groups:
    mug: ["cup", "tumbler"]
"""))

    assert config["SYNONYMS"]["mug"] == ["cup", "tumbler"]
    assert config["SYNONYMS"]["tech"] == SYNONYM_GROUPS["tech"]


def test_synonym_groups_replace_builtins(write_config):
    config = load_config(write_config("""
synonyms:
  replace: true
  groups:
    mug: ["cup"]
"""))

    assert config["SYNONYMS"] == {"mug": ["cup"]}


def test_default_config(monkeypatch):
    monkeypatch.setenv("DATA_PATH", "from-env.json")

    config = default_config()

    assert config["DATA_PATH"] == "from-env.json"
    assert config["WEIGHT_CONFIG"]["PARTIAL_KEYWORD_WEIGHT"] == 3
    assert config["SAMPLE_LIMIT"] == 5
