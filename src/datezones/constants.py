"""Application-level constants for date-zones."""

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "date-zones"

# ============================================================================
# Date input and output defaults
# ============================================================================

DEFAULT_DATE_EXPR = "now"
DEFAULT_OUTPUT_FORMAT = "%Y-%m-%d %I:%M %p %Z"
OUTPUT_FORMAT_24HR = "%Y-%m-%d %H:%M %Z"

# Output formats are passed on the command line as "+FORMAT", like date(1).
OUTPUT_FORMAT_PREFIX = "+"

# ============================================================================
# Zone tokens
# ============================================================================

PICK_TOKEN = "_"
LOCAL_TOKEN = "local"
UTC_ZONE = "Etc/UTC"

# Aliases every table starts with; "local" is added at load time.
BUILTIN_ALIASES: dict[str, tuple[str, ...]] = {
    "utc": (UTC_ZONE,),
    "UTC": (UTC_ZONE,),
}

# Zone used when the host zone cannot be detected.
FALLBACK_LOCAL_ZONE = UTC_ZONE

PICKER_PROMPT_TEMPLATE = "Timezone {position}: "

# ============================================================================
# Config file location
# ============================================================================

# Kept identical to the shell version so existing alias files keep working.
CONFIG_DIR_NAME = "date-zones.bash"
ALIASES_FILE_NAME = "aliases"
DEFAULT_CONFIG_HOME = "~/.config"

# ============================================================================
# Host date program
# ============================================================================

DATE_COMMAND = "date"
EPOCH_SECONDS_FORMAT = "+%s"

# ============================================================================
# Console output
# ============================================================================

ERROR_PREFIX = "ERROR:"
WARNING_PREFIX = "WARNING:"
CONVERTED_TO_TEXT = "Converted to..."
LABEL_COLOR = "\033[32m"
COLOR_RESET = "\033[0m"
