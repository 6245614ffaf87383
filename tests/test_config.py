import pytest

from chronify.core.config import Config, get_config, set_config
from chronify.core.exceptions import ConfigError


def test_config_defaults():
    config = Config()
    assert config.date_tags == []
    assert config.ambiguous_time_range == 8
    assert config.languages == ["en"]
    assert config.duration_style == "dhm"


def test_config_load_without_files(clean_env):
    assert Config.load() == Config()


def test_config_load_toml(clean_env):
    config_file = clean_env / "chronify.toml"
    config_file.write_text("""
[tags]
date_tags = ["due", "@remind"]

[parser]
ambiguous_time_range = 6
languages = ["en", "fr"]

[format]
duration_style = "natural"
""")

    config = Config.load(config_path=config_file)

    assert config.date_tags == ["due", "@remind"]
    assert config.ambiguous_time_range == 6
    assert config.languages == ["en", "fr"]
    assert config.duration_style == "natural"


def test_config_toml_comma_separated_tags(clean_env):
    config_file = clean_env / "chronify.toml"
    config_file.write_text('[tags]\ndate_tags = "due, remind"\n')

    assert Config.load(config_path=config_file).date_tags == ["due", "remind"]


def test_config_default_path_is_cwd(clean_env):
    (clean_env / "chronify.toml").write_text("[parser]\nambiguous_time_range = 7\n")
    assert Config.load().ambiguous_time_range == 7


def test_config_env_override_toml(clean_env, monkeypatch):
    config_file = clean_env / "chronify.toml"
    config_file.write_text("""
[parser]
ambiguous_time_range = 6

[format]
duration_style = "natural"
""")

    monkeypatch.setenv("CHRONIFY_AMBIGUOUS_TIME_RANGE", "10")
    monkeypatch.setenv("CHRONIFY_DATE_TAGS", "due, remind")

    config = Config.load(config_path=config_file)

    assert config.ambiguous_time_range == 10
    assert config.date_tags == ["due", "remind"]
    assert config.duration_style == "natural"


def test_config_dotenv_file(clean_env):
    (clean_env / ".env").write_text("CHRONIFY_DURATION_STYLE=clock\nCHRONIFY_LANGUAGES=de,en\n")

    config = Config.load()

    assert config.duration_style == "clock"
    assert config.languages == ["de", "en"]


def test_config_invalid_int(clean_env, monkeypatch):
    monkeypatch.setenv("CHRONIFY_AMBIGUOUS_TIME_RANGE", "eight")
    with pytest.raises(ConfigError):
        Config.load()


def test_config_invalid_toml(clean_env):
    config_file = clean_env / "chronify.toml"
    config_file.write_text("[parser\n")
    with pytest.raises(ConfigError):
        Config.load(config_path=config_file)


def test_merge_cli_args():
    config = Config(duration_style="dhm")
    merged = config.merge_cli_args(duration_style="clock", ambiguous_time_range=None)
    assert merged.duration_style == "clock"
    assert merged.ambiguous_time_range == 8
    assert config.duration_style == "dhm"


def test_global_config_lazy_load(clean_env, monkeypatch):
    monkeypatch.setenv("CHRONIFY_DURATION_STYLE", "hm")
    set_config(None)
    assert get_config().duration_style == "hm"
    assert get_config() is get_config()
