"""Configuration management for miniprof."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILE, DEFAULT_APPLICATION_PATH, DEFAULT_ROUTE_BASE_PATH
from .errors import ConfigError
from .models import RenderOptions, RenderPosition


class RoutingConfig(BaseModel):
    """Where the results UI fetches session data from."""

    route_base_path: str = Field(
        default=DEFAULT_ROUTE_BASE_PATH, description="Route, '~/' is app-relative"
    )
    application_path: str = Field(
        default=DEFAULT_APPLICATION_PATH, description="Application root for '~/' routes"
    )


class DisplayConfig(BaseModel):
    """Site-wide display defaults. Unset values are left to the UI."""

    position: RenderPosition | None = None
    show_trivial: bool | None = None
    show_time_with_children: bool | None = None
    max_traces_to_show: int | None = Field(default=None, ge=1)
    show_controls: bool | None = None
    start_hidden: bool | None = None

    def to_options(self) -> RenderOptions:
        return RenderOptions(**self.model_dump())


class ProfilerSettings(BaseModel):
    """Root configuration for miniprof."""

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def load_config(config_path: Path) -> ProfilerSettings:
    """Load settings from a miniprof.toml file.

    Args:
        config_path: Path to the config file, or to a directory holding one

    Returns:
        Loaded settings, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILE
    if not config_path.exists():
        return ProfilerSettings()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    try:
        return ProfilerSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def write_config_template(directory: Path) -> Path:
    """Write default miniprof.toml template.

    Args:
        directory: Directory to write the template into

    Returns:
        Path to the written config file
    """
    config_path = directory / CONFIG_FILE
    template = {
        "routing": {
            "route_base_path": DEFAULT_ROUTE_BASE_PATH,
            "application_path": DEFAULT_APPLICATION_PATH,
        },
        # Display defaults; omit a key to let the results UI decide
        "display": {
            "position": RenderPosition.LEFT.value,
            "show_trivial": False,
            "show_time_with_children": False,
            "max_traces_to_show": 15,
            "show_controls": False,
        },
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
