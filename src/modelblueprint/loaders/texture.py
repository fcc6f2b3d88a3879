"""
Blueprint Texture

Decodes the base64 data URLs a model document embeds its textures as.
"""

import base64
import binascii
from dataclasses import dataclass
from io import BytesIO

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..config.settings import TEXTURE_MODE
from ..raw.model_data import ModelFormatError, ModelTexture


@dataclass
class BlueprintTexture:
    """Decoded texture of a blueprint."""

    name: str
    image: Image.Image
    uv_width: int
    uv_height: int

    @classmethod
    def from_model(cls, texture: ModelTexture) -> "BlueprintTexture":
        """
        Decode a model texture.

        Args:
            texture: Texture entry of the model document

        Returns:
            BlueprintTexture holding an RGBA image

        Raises:
            ModelFormatError: If the data URL, base64 payload or image bytes are invalid
        """
        return cls(
            name=texture.name,
            image=decode_data_url(texture.source, texture.name),
            uv_width=texture.uv_width,
            uv_height=texture.uv_height,
        )

    @property
    def size(self):
        return self.image.size

    @property
    def pixels(self) -> np.ndarray:
        """Pixel array of shape (height, width, 4), dtype uint8."""
        return np.asarray(self.image, dtype=np.uint8)

    def __repr__(self):
        return f"BlueprintTexture(name='{self.name}', size={self.image.size}, uv=({self.uv_width}, {self.uv_height}))"


def decode_data_url(source: str, name: str = "") -> Image.Image:
    """Decode a ``data:<mime>;base64,<payload>`` URL into an RGBA image."""
    _, separator, payload = source.partition(",")
    if not separator:
        raise ModelFormatError(f"texture '{name}': invalid data URL format")

    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ModelFormatError(f"texture '{name}': base64 decode failed ({exc})") from exc

    try:
        img = Image.open(BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ModelFormatError(f"texture '{name}': failed to load image ({exc})") from exc

    return img.convert(TEXTURE_MODE)
