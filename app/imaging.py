"""
Avatar transcoder: decode an uploaded image and re-encode it as WebP.

Uses Pillow. The output has a fixed width; height follows the source aspect
ratio. Images are upscaled when narrower than the target width.
"""
from __future__ import annotations

import io

from PIL import Image

from app.constants import WEBP_QUALITY

# Modes WebP can store directly
_WEBP_MODES = ("RGB", "RGBA")


class AvatarTranscoder:
    """Stateless; safe to share across threads."""

    def decode(self, data: bytes) -> Image.Image:
        image = Image.open(io.BytesIO(data))
        image.load()
        # Keep alpha where the source has it, flatten everything else to RGB
        if image.mode in _WEBP_MODES:
            return image
        if image.mode in ("LA", "PA") or (
            image.mode == "P" and "transparency" in image.info
        ):
            return image.convert("RGBA")
        return image.convert("RGB")

    def encode_webp(self, image: Image.Image, width: int) -> bytes:
        height = max(1, round(image.height * width / image.width))
        resized = image.resize((width, height), Image.LANCZOS)

        buf = io.BytesIO()
        resized.save(buf, format="WEBP", quality=WEBP_QUALITY)
        return buf.getvalue()

    def transcode(self, data: bytes, width: int) -> bytes:
        return self.encode_webp(self.decode(data), width)
