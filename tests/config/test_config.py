"""Test configuration management."""

from pathlib import Path

import pytest

from musicmeta.config.config import HTTP_TIMEOUT_DEFAULT, Config
from musicmeta.config.paths import default_config_path


def test_default_config(isolated_config: Path) -> None:
    """Test default configuration values and save location."""
    config = Config()
    assert config.log_file is None
    assert config.merge_tag_headers is False
    assert config.include_native is False
    assert config.skip_covers is False
    assert config.http_timeout == HTTP_TIMEOUT_DEFAULT

    written = config.save()
    assert written == default_config_path()
    assert isolated_config.exists()


def test_missing_file_yields_defaults_without_writing(isolated_config: Path) -> None:
    """Loading without a file returns defaults and creates nothing."""
    loaded = Config.load()

    assert loaded == Config()
    assert not isolated_config.exists()


def test_save_load_toml(isolated_config: Path) -> None:
    """Test saving and loading configuration in TOML format."""
    _ = isolated_config
    original_config = Config(
        log_file=Path("/test/logs/musicmeta.log"),
        merge_tag_headers=True,
        include_native=True,
        skip_covers=True,
        http_timeout=3.5,
    )
    _ = original_config.save()

    Config.reset()
    loaded_config = Config.load()

    assert loaded_config.log_file == Path("/test/logs/musicmeta.log")
    assert loaded_config.merge_tag_headers is True
    assert loaded_config.include_native is True
    assert loaded_config.skip_covers is True
    assert loaded_config.http_timeout == 3.5


def test_save_omits_unset_log_file(isolated_config: Path) -> None:
    """A ``None`` log file is left out of the rendered TOML."""
    _ = Config().save()

    content = isolated_config.read_text(encoding="utf-8")
    assert "\nlog_file =" not in content
    assert "merge_tag_headers = false" in content

    Config.reset()
    assert Config.load().log_file is None


def test_load_is_cached_until_reset(isolated_config: Path) -> None:
    """Subsequent loads return the cached instance."""
    _ = isolated_config
    first = Config.load()
    assert Config.load() is first

    Config.reset()
    assert Config.load() is not first


def test_unknown_keys_are_ignored(isolated_config: Path) -> None:
    """Keys the configuration does not define are dropped with a warning."""
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(
        'skip_covers = true\nbase_path = "/music"\n', encoding="utf-8"
    )

    loaded = Config.load()

    assert loaded.skip_covers is True
    assert not hasattr(loaded, "base_path")


def test_blank_log_file_is_none(isolated_config: Path) -> None:
    """An empty ``log_file`` string means no log file."""
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load().log_file is None


def test_invalid_toml_raises(isolated_config: Path) -> None:
    """Malformed files propagate the TOML decode error."""
    import tomllib

    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("skip_covers = = true\n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()
