"""Image decoding, pixel sampling, and data-URL encoding."""

from __future__ import annotations

import asyncio
import base64
import io

from PIL import Image, UnidentifiedImageError

from skinpack.errors import DecodeError
from skinpack.logging import get_logger

logger = get_logger("image_io")

DEFAULT_MEDIA_TYPE = "image/png"


def decode_skin(data: bytes, name: str = "<bytes>") -> Image.Image:
    """Decode raw image bytes into a fully loaded RGBA image.

    Args:
        data: Encoded image bytes (normally PNG).
        name: File name used in error messages.

    Returns:
        A Pillow ``Image`` in RGBA mode with the source dimensions.

    Raises:
        DecodeError: If the bytes are not a readable image.
    """
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except Exception as exc:
        raise DecodeError(f"Cannot decode image: {name}") from exc

    if img.mode != "RGBA":
        img = img.convert("RGBA")
    logger.debug("Decoded %s (%dx%d)", name, img.width, img.height)
    return img


async def decode_skin_async(data: bytes, name: str = "<bytes>") -> Image.Image:
    """Decode *data* in a worker thread; see :func:`decode_skin`."""
    return await asyncio.to_thread(decode_skin, data, name)


def media_type_of(data: bytes) -> str:
    """Return the MIME type Pillow detects for *data*, defaulting to PNG."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            return Image.MIME.get(img.format or "", DEFAULT_MEDIA_TYPE)
    except (UnidentifiedImageError, OSError):
        return DEFAULT_MEDIA_TYPE


def in_bounds(image: Image.Image, x: int, y: int) -> bool:
    """Return True if ``(x, y)`` addresses a pixel of *image*."""
    return 0 <= x < image.width and 0 <= y < image.height


def alpha_at(image: Image.Image, x: int, y: int) -> int:
    """Read the alpha channel of *image* at ``(x, y)``.

    Images without an alpha band are opaque and always return 255.

    Raises:
        IndexError: If the coordinate lies outside the image.
    """
    if not in_bounds(image, x, y):
        raise IndexError(f"Pixel ({x}, {y}) outside {image.width}x{image.height} image")
    if "A" not in image.getbands():
        return 255
    return image.getchannel("A").getpixel((x, y))  # type: ignore[return-value]


def image_to_png_bytes(image: Image.Image) -> bytes:
    """Serialize a PIL Image to PNG bytes."""
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def image_to_data_url(
    image: Image.Image | bytes, media_type: str = DEFAULT_MEDIA_TYPE
) -> str:
    """Convert a PIL Image or raw bytes to a base64 data URL.

    Raw bytes are embedded untouched, so the original file content of a
    skin survives byte for byte.  Images are encoded as PNG first.

    Returns:
        A data URL string: ``data:{media_type};base64,{encoded_data}``
    """
    raw = image_to_png_bytes(image) if isinstance(image, Image.Image) else image
    encoded = base64.b64encode(raw).decode("ascii")
    return f"data:{media_type};base64,{encoded}"

