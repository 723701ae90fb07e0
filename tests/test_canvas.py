import numpy as np
import pytest
from PIL import Image

from core.color import Color, BLACK
from renderer.canvas import Canvas
from renderer.tone_mapping import clamp_to_uint8, reinhard_tone_mapping


def test_new_canvas_is_black():
    c = Canvas(10, 20)
    assert (c.width, c.height) == (10, 20)
    assert c.pixels.shape == (20, 10, 3)
    assert c.pixel_at(9, 19) == BLACK


def test_write_and_read_pixel():
    c = Canvas(10, 20)
    c.write_pixel(2, 3, Color(1, 0, 0))
    assert c.pixel_at(2, 3) == Color(1, 0, 0)
    assert c.pixel_at(3, 2) == BLACK


def test_frozen_canvas_rejects_writes():
    c = Canvas(2, 2).freeze()
    assert c.frozen
    with pytest.raises(ValueError):
        c.write_pixel(0, 0, Color(1, 1, 1))


def test_ppm_header_and_pixels():
    c = Canvas(5, 3)
    c.write_pixel(0, 0, Color(1.5, 0, 0))
    c.write_pixel(2, 1, Color(0, 0.5, 0))
    c.write_pixel(4, 2, Color(-0.5, 0, 1))
    lines = c.to_ppm().splitlines()
    assert lines[:3] == ["P3", "5 3", "255"]
    assert lines[3] == "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0"
    assert lines[4] == "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0"
    assert lines[5] == "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255"


def test_ppm_splits_long_lines():
    c = Canvas(10, 2, fill=Color(1, 0.8, 0.6))
    lines = c.to_ppm().splitlines()
    assert lines[3] == "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204"
    assert lines[4] == "153 255 204 153 255 204 153 255 204 153 255 204 153"
    assert lines[5] == lines[3]
    assert lines[6] == lines[4]
    assert all(len(line) <= 70 for line in lines)


def test_ppm_ends_with_newline():
    assert Canvas(5, 3).to_ppm().endswith("\n")


def test_to_image_and_save(temp_output_dir):
    c = Canvas(4, 2)
    c.write_pixel(1, 0, Color(2.0, 0.5, 0))
    img = c.to_image()
    assert img.size == (4, 2)
    assert img.mode == "RGB"
    assert img.getpixel((1, 0)) == (255, 128, 0)

    png = temp_output_dir / "out.png"
    c.save(png)
    with Image.open(png) as loaded:
        assert loaded.getpixel((1, 0)) == (255, 128, 0)

    ppm = temp_output_dir / "out.ppm"
    c.save(ppm)
    assert ppm.read_text().startswith("P3\n4 2\n255\n")


def test_tone_mapped_image_keeps_highlights_below_white():
    c = Canvas(2, 1)
    c.write_pixel(0, 0, Color(4.0, 4.0, 4.0))
    img = c.to_image(exposure=1.0)
    r, g, b = img.getpixel((0, 0))
    assert r == g == b
    assert 200 < r < 255


def test_tone_mapping_helpers():
    data = np.array([[[-1.0, 0.5, 3.0]]])
    assert clamp_to_uint8(data).tolist() == [[[0, 128, 255]]]
    mapped = reinhard_tone_mapping(np.zeros((1, 1, 3)))
    assert mapped.dtype == np.uint8
    assert mapped.tolist() == [[[0, 0, 0]]]
