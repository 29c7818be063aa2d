"""Tests for miniprof configuration."""

from pathlib import Path

import pytest

from miniprof.config import (
    DisplayConfig,
    ProfilerSettings,
    RoutingConfig,
    load_config,
    write_config_template,
)
from miniprof.errors import ConfigError
from miniprof.models import RenderOptions, RenderPosition


def test_defaults():
    """Default settings use the app-relative profiler route and no display defaults."""
    settings = ProfilerSettings()
    assert settings.routing.route_base_path == "~/profiler"
    assert settings.routing.application_path == "/"
    assert settings.display.to_options() == RenderOptions()


def test_load_missing_returns_defaults(tmp_path: Path):
    """A missing config file should yield defaults."""
    assert load_config(tmp_path / "absent.toml") == ProfilerSettings()


def test_load_from_directory(tmp_path: Path):
    """Passing a directory should read miniprof.toml inside it."""
    (tmp_path / "miniprof.toml").write_text(
        '[routing]\nroute_base_path = "/prof"\n\n[display]\nposition = "right"\n'
    )
    settings = load_config(tmp_path)
    assert settings.routing == RoutingConfig(route_base_path="/prof")
    assert settings.display.position == RenderPosition.RIGHT
    assert settings.display.show_trivial is None


def test_load_invalid_toml(tmp_path: Path):
    """Malformed TOML should raise ConfigError."""
    path = tmp_path / "miniprof.toml"
    path.write_text("[routing\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(path)


def test_load_invalid_values(tmp_path: Path):
    """Values failing validation should raise ConfigError."""
    path = tmp_path / "miniprof.toml"
    path.write_text('[display]\nposition = "top"\n')
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(path)


def test_template_round_trip(tmp_path: Path):
    """The written template should load back with its display defaults."""
    path = write_config_template(tmp_path)
    assert path == tmp_path / "miniprof.toml"
    settings = load_config(path)
    assert settings.display == DisplayConfig(
        position=RenderPosition.LEFT,
        show_trivial=False,
        show_time_with_children=False,
        max_traces_to_show=15,
        show_controls=False,
    )
    assert settings.display.start_hidden is None
