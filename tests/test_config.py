"""
Tests for configuration loading.
"""

from pathlib import Path

from spotify_search.core.config import (
    Config,
    get_config_path,
    get_log_file_path,
    load_config,
)


def test_defaults_without_config_file(isolated_dirs):
    config = load_config()

    assert config == Config()
    assert config.web.port == 3030
    assert config.web.page_size == 200
    assert config.web.fallback_thumbnail_url == "/static/fallback-cover.svg"
    assert config.library.path == str(Path.home() / "spotify-backup")


def test_no_config_file_is_written(isolated_dirs):
    load_config()

    assert not (isolated_dirs / "config" / "spotify-search" / "config.toml").exists()


def test_loads_local_config_toml(isolated_dirs):
    (isolated_dirs / "config.toml").write_text(
        """
[library]
path = "/data/export"

[web]
port = 8080
page_size = 50

[logging]
level = "debug"
console_output = true
""",
        encoding="utf-8",
    )

    config = load_config()

    assert get_config_path() == isolated_dirs / "config.toml"
    assert config.library.path == "/data/export"
    assert config.web.port == 8080
    assert config.web.page_size == 50
    assert config.web.host == "127.0.0.1"
    assert config.logging.level == "DEBUG"
    assert config.logging.console_output is True


def test_xdg_config_is_used(isolated_dirs):
    config_dir = isolated_dirs / "config" / "spotify-search"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text('[web]\nhost = "0.0.0.0"\n', encoding="utf-8")

    assert load_config().web.host == "0.0.0.0"


def test_invalid_web_section_falls_back_to_defaults(isolated_dirs):
    (isolated_dirs / "config.toml").write_text("[web]\nport = 0\n", encoding="utf-8")

    assert load_config().web.port == 3030


def test_invalid_toml_falls_back_to_defaults(isolated_dirs):
    (isolated_dirs / "config.toml").write_text("[library\npath = ", encoding="utf-8")

    assert load_config() == Config()


def test_env_overrides_library_path(isolated_dirs, monkeypatch):
    (isolated_dirs / "config.toml").write_text(
        '[library]\npath = "/from/toml"\n', encoding="utf-8"
    )
    monkeypatch.setenv("SPOTIFY_SEARCH_LIBRARY_PATH", "/from/env")

    assert load_config().library.path == "/from/env"


def test_log_file_path(isolated_dirs):
    config = Config()

    assert get_log_file_path(config) == (
        isolated_dirs / "data" / "spotify-search" / "spotify-search.log"
    )

    config.logging.log_file = "/var/log/custom.log"

    assert get_log_file_path(config) == Path("/var/log/custom.log")
