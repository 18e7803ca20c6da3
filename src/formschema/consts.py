"""Constants for formschema"""

# ==================== Array Bounds ====================
DEFAULT_MIN_ITEMS = 1
DEFAULT_MAX_ITEMS = 1000

# ==================== Schema Formats ====================
# JSON Schema string format -> HTML input type
FORMAT_INPUT_TYPES = {
    "email": "email",
    "uri": "url",
}

# Input types that hold several values in a single control
NATIVE_MULTI_VALUE_TYPES = ("file",)

# ==================== Environment ====================
ENV_PREFIX = "FORMSCHEMA_"

# ==================== Template Names ====================
TEMPLATE_OPTION = "option.j2"
