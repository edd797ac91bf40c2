"""Slim/classic arm model detection.

Slim (Alex) skins have 3px-wide arms, so the texture area a 4px arm uses
for the last column of its bottom cap is left empty.  Sampling that pixel
on both arms tells the two layouts apart.
"""

from __future__ import annotations

from PIL import Image

from skinpack.constants import SLIM_SAMPLE_POINTS
from skinpack.image_io import alpha_at, in_bounds
from skinpack.logging import get_logger

logger = get_logger("classifier")


def is_slim(
    image: Image.Image,
    sample_points: tuple[tuple[int, int], ...] = SLIM_SAMPLE_POINTS,
) -> bool:
    """Return True if *image* uses the slim arm model.

    A skin is slim only when every sample point has alpha exactly 0.
    Points outside the image (e.g. the left arm on a legacy 64x32 skin)
    make the skin classic.  Images without an alpha band are opaque and
    classic as well.

    Classification is best effort: if the alpha band cannot be extracted
    the skin is reported as classic instead of failing the batch.

    Args:
        image: Decoded skin texture.
        sample_points: ``(x, y)`` coordinates to sample.

    Returns:
        True for slim, False for classic.
    """
    if not all(in_bounds(image, x, y) for x, y in sample_points):
        logger.debug(
            "Sample points outside %dx%d image; classifying as classic",
            image.width,
            image.height,
        )
        return False
    try:
        return all(alpha_at(image, x, y) == 0 for x, y in sample_points)
    except (ValueError, OSError, MemoryError) as exc:
        logger.warning("Cannot read alpha band (%s); classifying as classic", exc)
        return False
