"""Head preview rendering.

The launcher shows a 3D render for each skin; we substitute the front of
the head scaled up with hard pixel edges.  The launcher replaces it with a
real render the next time the skin is saved there.
"""

from __future__ import annotations

from PIL import Image

from skinpack.constants import HEAD_FRONT_BOX, PREVIEW_SIZE
from skinpack.errors import RenderContextError
from skinpack.image_io import image_to_data_url
from skinpack.logging import get_logger

logger = get_logger("preview")


def render_head_preview(
    image: Image.Image,
    size: int = PREVIEW_SIZE,
    box: tuple[int, int, int, int] = HEAD_FRONT_BOX,
) -> Image.Image:
    """Crop the head front of *image* and upscale it with nearest neighbour.

    With the default 8x8 box and 128px output every source pixel becomes a
    solid 16x16 block.  Regions of the box outside the source image come
    out transparent.

    Args:
        image: Decoded skin texture (RGBA).
        size: Edge length of the square output.
        box: ``(left, upper, right, lower)`` crop rectangle.

    Returns:
        A ``size`` x ``size`` RGBA image.

    Raises:
        RenderContextError: If the preview surface cannot be allocated.
    """
    try:
        head = image.crop(box)
        preview = head.resize((size, size), resample=Image.Resampling.NEAREST)
    except (MemoryError, ValueError) as exc:
        raise RenderContextError(f"Cannot allocate {size}x{size} preview: {exc}") from exc

    if preview.mode != "RGBA":
        preview = preview.convert("RGBA")
    return preview


def head_preview_data_url(image: Image.Image, size: int = PREVIEW_SIZE) -> str:
    """Render the head preview of *image* as a PNG data URL."""
    preview = render_head_preview(image, size=size)
    logger.debug("Rendered %dx%d head preview", preview.width, preview.height)
    return image_to_data_url(preview)
