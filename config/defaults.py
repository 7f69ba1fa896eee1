"""
Application default settings and constants
"""

# =============================================================================
# Application Information
# =============================================================================
APP_NAME = "SVG to PowerPoint Converter"
APP_VERSION = "1.0.0"
APP_DATA_DIRNAME = "SvgToPptx"

# =============================================================================
# Placement Defaults (inches)
# =============================================================================
DEFAULT_TARGET_WIDTH = 9.0
DEFAULT_TARGET_HEIGHT = 6.5
DEFAULT_SLIDE_WIDTH = 10.0     # 16:9 layout
DEFAULT_SLIDE_HEIGHT = 5.63
DEFAULT_USER_SCALE = 1.0

# Used when the root <svg> has no usable viewBox
DEFAULT_VIEWBOX = (0.0, 0.0, 1000.0, 600.0)

DEFAULT_OUTPUT_FILENAME = "presentation.pptx"

# =============================================================================
# Calibration Constants
# Tuned against PowerPoint's rendering; these are not SVG semantics.
# =============================================================================
STROKE_WIDTH_DIVISOR = 10.0            # stroke-width -> line width (pt)
VERTICAL_OFFSET_CORRECTION = -1.0      # inches, added to the vertical offset
TEXT_FONT_SCALE = 0.55                 # <text> font-size -> pt
RECT_LABEL_FONT_SCALE = 0.8            # text inside <rect> font-size -> pt
TEXT_WIDTH_DIVISOR = 60.0              # pt per inch per character (estimate)
MIN_TEXT_WIDTH = 1.5                   # inches
BASELINE_DIVISOR = 50.0                # pt -> inches of baseline lift
TEXT_LINE_HEIGHT_FACTOR = 1.4
RECT_LABEL_INSET = 0.05                # inches from each rect edge
ROUNDING_DIVISOR = 10.0
MAX_ROUNDING = 0.5

# =============================================================================
# Style Defaults
# =============================================================================
DEFAULT_TEXT_FONT_SIZE = 12.0
DEFAULT_RECT_LABEL_FONT_SIZE = 14.0
DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_LINE_COLOR = "#000000"
DEFAULT_LINE_WIDTH_PT = 1.0

NAMED_COLORS = {
    "white": "#FFFFFF",
    "black": "#000000",
    "red": "#FF0000",
    "green": "#00FF00",
    "blue": "#0000FF",
    "gray": "#808080",
    "grey": "#808080",
    "yellow": "#FFFF00",
    "orange": "#FFA500",
    "pink": "#FFC0CB",
}

# =============================================================================
# Upstream Model Settings
# =============================================================================
API_KEY_ENV_VAR = "ANTHROPIC_API_KEY"
CLAUDE_MODEL = "claude-3-5-sonnet-20240620"
CLAUDE_MAX_TOKENS = 4000
CLAUDE_TIMEOUT_SECONDS = 120

SUPPORTED_IMAGE_FORMATS = ("PNG", "JPEG")

# =============================================================================
# Settings File
# =============================================================================
SETTINGS_FILENAME = "settings.json"
