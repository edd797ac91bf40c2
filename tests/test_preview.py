"""Tests for skinpack.preview — head preview rendering."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from skin_factory import BODY_COLOR, data_url_to_bytes, head_color, make_skin
from skinpack.errors import RenderContextError
from skinpack.preview import head_preview_data_url, render_head_preview


class TestRenderHeadPreview:
    """Tests for cropping and upscaling the head front."""

    def test_size_and_mode(self) -> None:
        """The preview is a 128x128 RGBA image."""
        preview = render_head_preview(make_skin())
        assert preview.size == (128, 128)
        assert preview.mode == "RGBA"

    @pytest.mark.parametrize("size", [(64, 64), (64, 32), (16, 16), (128, 128)])
    def test_fixed_size_for_any_input(self, size: tuple[int, int]) -> None:
        """Any input size gives a 128x128 preview."""
        assert render_head_preview(make_skin(size=size)).size == (128, 128)

    def test_each_source_pixel_becomes_solid_block(self) -> None:
        """Every head pixel fills exactly one solid 16x16 block."""
        preview = render_head_preview(make_skin())
        for sy in range(8):
            for sx in range(8):
                expected = head_color(sx, sy)
                block = preview.crop((sx * 16, sy * 16, sx * 16 + 16, sy * 16 + 16))
                colors = block.getcolors()
                assert colors == [(256, expected)], (sx, sy)

    def test_no_blended_colours(self) -> None:
        """The preview contains only colours present in the head front."""
        preview = render_head_preview(make_skin())
        palette = {head_color(x, y) for x in range(8) for y in range(8)}
        assert {c for _, c in preview.getcolors(maxcolors=4096)} == palette

    def test_only_head_region_sampled(self) -> None:
        """Pixels outside the 8x8 head front never appear."""
        img = make_skin()
        assert BODY_COLOR not in {
            c for _, c in render_head_preview(img).getcolors(maxcolors=4096)
        }

    def test_allocation_failure_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A failed canvas allocation raises RenderContextError."""
        img = make_skin()

        def no_memory(*args: object, **kwargs: object) -> Image.Image:
            raise MemoryError

        monkeypatch.setattr(Image.Image, "resize", no_memory)
        with pytest.raises(RenderContextError):
            render_head_preview(img)


class TestHeadPreviewDataUrl:
    """Tests for the preview data URL."""

    def test_png_data_url(self) -> None:
        """The URL carries a 128x128 PNG of the head front."""
        url = head_preview_data_url(make_skin())
        assert url.startswith("data:image/png;base64,")
        img = Image.open(io.BytesIO(data_url_to_bytes(url)))
        assert img.format == "PNG"
        assert img.size == (128, 128)
        assert img.convert("RGBA").getpixel((0, 0)) == head_color(0, 0)
        assert img.convert("RGBA").getpixel((127, 127)) == head_color(7, 7)

    def test_deterministic(self) -> None:
        """The same skin always yields the same URL."""
        assert head_preview_data_url(make_skin()) == head_preview_data_url(make_skin())
