"""Reading, writing and layering 8-bit RGBA images stored as PNG files."""

from __future__ import annotations

import io
from dataclasses import dataclass
from os import PathLike
from typing import Union

from PIL import Image

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

StrPath = Union[str, "PathLike[str]"]


class ImageError(Exception):
    """Raised when a PNG file cannot be read or written."""


@dataclass
class RGBAImage:
    """An image as a flat buffer of RGBA bytes, row by row."""

    width: int
    height: int
    pixels: bytearray

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        self.pixels = bytearray(self.pixels)
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise ValueError(
                f"expected {expected} bytes for a {self.width}x{self.height} "
                f"RGBA image, got {len(self.pixels)}"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> "RGBAImage":
        """Return a fully transparent black image."""
        return cls(width, height, bytearray(width * height * 4))

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the RGBA value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = (y * self.width + x) * 4
        r, g, b, a = self.pixels[offset:offset + 4]
        return r, g, b, a

    def overlay(self, other: "RGBAImage") -> None:
        """Draw ``other`` on top of this image, in place."""
        overlay_images(
            self,
            other,
            min(self.width, other.width),
            min(self.height, other.height),
        )


def read_png(path: StrPath) -> RGBAImage:
    """Load a PNG file and expand it to 8-bit RGBA."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise ImageError(f"Unable to open file {path}") from exc

    if not data.startswith(PNG_SIGNATURE):
        raise ImageError(f"{path} is not a valid PNG file")

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            if img.mode.startswith("I"):
                img = img.convert("I").point(lambda v: v * (1 / 256)).convert("L")
            rgba = img.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise ImageError(f"{path} could not be decoded: {exc}") from exc

    return RGBAImage(rgba.width, rgba.height, bytearray(rgba.tobytes()))


def write_png(path: StrPath, image: RGBAImage) -> None:
    """Save an image as an 8-bit RGBA PNG file."""
    picture = Image.frombytes("RGBA", (image.width, image.height), bytes(image.pixels))
    try:
        picture.save(path, format="PNG")
    except OSError as exc:
        raise ImageError(f"Unable to open file {path} for writing") from exc


def overlay_images(
    background: RGBAImage, overlay: RGBAImage, width: int, height: int
) -> None:
    """Copy every non-transparent pixel among the first ``width * height``
    pixels of ``overlay`` onto ``background``, in place."""
    if width < 0 or height < 0:
        raise ValueError("overlay dimensions must not be negative")
    count = width * height
    if count * 4 > len(background.pixels) or count * 4 > len(overlay.pixels):
        raise ValueError("overlay region is larger than one of the images")

    source = overlay.pixels
    target = background.pixels
    for offset in range(0, count * 4, 4):
        if source[offset + 3] > 0:
            target[offset:offset + 4] = source[offset:offset + 4]