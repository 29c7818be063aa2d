"""Constants for miniprof."""

CONFIG_FILE = "miniprof.toml"

# Default route the presentation layer fetches session data from
DEFAULT_ROUTE_BASE_PATH = "~/profiler"
DEFAULT_APPLICATION_PATH = "/"

# Header timestamp format for text reports
HEADER_TIME_FORMAT = "%Y-%m-%d %H:%M:%S UTC"

# Prefix repeated once per nesting level in text reports
DEPTH_MARKER = ">"
