"""Fixed offsets and sizes of the Minecraft skin texture layout.

Coordinates are ``(x, y)`` in the pixel grid of the source texture.
"""

# ---------------------------------------------------------------------------
# Slim (Alex) arm detection
# ---------------------------------------------------------------------------

# Right arm, bottom cap: past the last column of a 3px-wide arm
SLIM_SAMPLE_RIGHT_ARM: tuple[int, int] = (51, 16)

# Left arm, bottom cap (64x64 layout only)
SLIM_SAMPLE_LEFT_ARM: tuple[int, int] = (42, 48)

SLIM_SAMPLE_POINTS: tuple[tuple[int, int], ...] = (
    SLIM_SAMPLE_RIGHT_ARM,
    SLIM_SAMPLE_LEFT_ARM,
)

# ---------------------------------------------------------------------------
# Head preview
# ---------------------------------------------------------------------------

# Front face of the head: (left, upper, right, lower)
HEAD_FRONT_BOX: tuple[int, int, int, int] = (8, 8, 16, 16)

PREVIEW_SIZE: int = 128

# ---------------------------------------------------------------------------
# Output document
# ---------------------------------------------------------------------------

DOCUMENT_VERSION: int = 1

SKIN_ID_PREFIX: str = "skin_"

DEFAULT_OUTPUT_NAME: str = "launcher_custom_skins.json"

DEFAULT_TIMESTAMP_STEP_MS: int = 1
