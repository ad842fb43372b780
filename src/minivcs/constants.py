"""Constants for minivcs."""

# Repository marker directory (relative to the working directory)
VCS_DIR = "vcs"

# Files and directories inside VCS_DIR
CONFIG_FILE = "config.txt"
INDEX_FILE = "index.txt"
LOG_FILE = "log.txt"
COMMITS_DIR = "commits"
SETTINGS_FILE = "settings.yaml"

# Field separator for history log lines: <commit_id>/<author>/<message>
LOG_FIELD_SEPARATOR = "/"

# Version
VCS_VERSION = "0.1.0"
