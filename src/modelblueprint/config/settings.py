"""
Blueprint Configuration Settings

All configuration constants for blueprint construction.
Modify these values to change how model documents are interpreted.
"""

from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# ============================================================================
# Model Units
# ============================================================================

MODEL_TO_BLOCK_MULTIPLIER = 16.0  # Editor pixels per block
DEFAULT_MODEL_SCALE = 16.0        # Used when a model has no elements

# ============================================================================
# Animation Settings
# ============================================================================

DEFAULT_INTERPOLATION = "linear"  # Used when a keyframe names no interpolation
EFFECT_ANIMATOR_ID = "effect"     # Animator id carrying the script channel

# ============================================================================
# Loader Settings
# ============================================================================

MODEL_FILE_ENCODING = "utf-8"
TEXTURE_MODE = "RGBA"             # Pillow mode textures are converted to
MAX_BUILD_WORKERS = None          # Thread pool size for animation builds (None = serial)

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
