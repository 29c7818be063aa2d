"""miniprof errors."""


class MiniProfError(Exception):
    """Base exception for miniprof errors."""


class ConfigError(MiniProfError):
    """Raised when a configuration file cannot be read or validated."""


class SessionLoadError(MiniProfError):
    """Raised when a serialized session cannot be loaded."""
