import pytest
from PIL import Image

from randomface.image import (
    PNG_SIGNATURE,
    ImageError,
    RGBAImage,
    overlay_images,
    read_png,
    write_png,
)


def _image(width, height, colors):
    pixels = bytearray()
    for color in colors:
        pixels.extend(color)
    return RGBAImage(width, height, pixels)


def test_blank_is_transparent():
    img = RGBAImage.blank(3, 2)
    assert len(img.pixels) == 3 * 2 * 4
    assert all(value == 0 for value in img.pixels)


def test_constructor_rejects_wrong_length():
    with pytest.raises(ValueError):
        RGBAImage(2, 2, bytearray(5))


def test_constructor_rejects_negative_size():
    with pytest.raises(ValueError):
        RGBAImage(-1, 2, bytearray())


def test_pixel_reads_row_major():
    colors = [(1, 2, 3, 4), (5, 6, 7, 8), (9, 10, 11, 12), (13, 14, 15, 16)]
    img = _image(2, 2, colors)
    assert img.pixel(0, 0) == colors[0]
    assert img.pixel(1, 0) == colors[1]
    assert img.pixel(0, 1) == colors[2]
    assert img.pixel(1, 1) == colors[3]


def test_pixel_out_of_range():
    img = RGBAImage.blank(2, 2)
    with pytest.raises(IndexError):
        img.pixel(2, 0)
    with pytest.raises(IndexError):
        img.pixel(0, -1)


def test_round_trip(tmp_path):
    colors = [(10, 20, 30, 40), (50, 60, 70, 80), (90, 100, 110, 120)]
    original = _image(3, 1, colors)
    path = tmp_path / "out.png"
    write_png(path, original)
    loaded = read_png(path)
    assert loaded == original


def test_written_file_has_png_signature(tmp_path):
    path = tmp_path / "sig.png"
    write_png(path, RGBAImage.blank(1, 1))
    assert path.read_bytes()[:8] == PNG_SIGNATURE


def test_read_missing_file(tmp_path):
    with pytest.raises(ImageError):
        read_png(tmp_path / "missing.png")


def test_read_rejects_non_png(tmp_path):
    path = tmp_path / "fake.png"
    path.write_bytes(b"not a png file at all")
    with pytest.raises(ImageError):
        read_png(path)


def test_write_to_missing_directory(tmp_path):
    with pytest.raises(ImageError):
        write_png(tmp_path / "nowhere" / "x.png", RGBAImage.blank(1, 1))


def test_read_grayscale_expands_to_opaque_rgb(tmp_path):
    path = tmp_path / "gray.png"
    Image.new("L", (2, 1), 77).save(path)
    img = read_png(path)
    assert (img.width, img.height) == (2, 1)
    assert img.pixel(1, 0) == (77, 77, 77, 255)


def test_read_palette_with_transparency(tmp_path):
    path = tmp_path / "pal.png"
    rgba = Image.new("RGBA", (2, 1))
    rgba.putpixel((0, 0), (200, 0, 0, 0))
    rgba.putpixel((1, 0), (0, 0, 200, 255))
    rgba.convert("P").save(path, transparency=0) if False else None
    palette = Image.new("P", (2, 1))
    palette.putpalette([200, 0, 0, 0, 0, 200])
    palette.putpixel((0, 0), 0)
    palette.putpixel((1, 0), 1)
    palette.save(path, transparency=0)
    img = read_png(path)
    assert img.pixel(0, 0)[3] == 0
    assert img.pixel(1, 0)[:3] == (0, 0, 200)
    assert img.pixel(1, 0)[3] == 255


def test_overlay_copies_only_visible_pixels():
    background = _image(3, 1, [(1, 1, 1, 1), (2, 2, 2, 2), (3, 3, 3, 3)])
    top = _image(3, 1, [(9, 9, 9, 0), (8, 8, 8, 5), (7, 7, 7, 200)])
    background.overlay(top)
    assert background.pixel(0, 0) == (1, 1, 1, 1)
    assert background.pixel(1, 0) == (8, 8, 8, 5)
    assert background.pixel(2, 0) == (7, 7, 7, 200)


def test_overlay_leaves_overlay_untouched():
    background = RGBAImage.blank(2, 1)
    top = _image(2, 1, [(4, 5, 6, 7), (0, 0, 0, 0)])
    snapshot = bytearray(top.pixels)
    background.overlay(top)
    assert top.pixels == snapshot


def test_overlay_images_limits_to_region():
    background = RGBAImage.blank(4, 1)
    top = _image(4, 1, [(6, 6, 6, 9)] * 4)
    overlay_images(background, top, 2, 1)
    assert background.pixel(1, 0) == (6, 6, 6, 9)
    assert background.pixel(2, 0) == (0, 0, 0, 0)


def test_overlay_images_rejects_oversized_region():
    background = RGBAImage.blank(2, 2)
    top = RGBAImage.blank(2, 2)
    with pytest.raises(ValueError):
        overlay_images(background, top, 3, 2)


def test_overlay_with_smaller_image_uses_minimum_size():
    background = RGBAImage.blank(3, 3)
    top = _image(1, 1, [(5, 5, 5, 5)])
    background.overlay(top)
    assert background.pixel(0, 0) == (5, 5, 5, 5)
    assert sum(background.pixels) == 5 * 4