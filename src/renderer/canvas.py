# renderer/canvas.py
import numpy as np
from PIL import Image
from core.color import Color
from renderer.tone_mapping import clamp_to_uint8, reinhard_tone_mapping

PPM_LINE_LENGTH = 70


class Canvas:
    """
    Pixel buffer of linear RGB floats, stored as a (height, width, 3) array.
    Values are unclamped until exported.
    """
    def __init__(self, width: int, height: int, fill: Color = None):
        if width < 1 or height < 1:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)
        if fill is not None:
            self.pixels[:, :] = fill.as_tuple()

    def write_pixel(self, x: int, y: int, color: Color):
        self.pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[y, x]
        return Color(float(r), float(g), float(b))

    def write_rows(self, y0: int, block):
        """Copies a (rows, width, 3) block in starting at row y0."""
        block = np.asarray(block, dtype=np.float64)
        self.pixels[y0:y0 + block.shape[0]] = block

    def freeze(self):
        self.pixels.setflags(write=False)
        return self

    @property
    def frozen(self) -> bool:
        return not self.pixels.flags.writeable

    def to_ppm(self) -> str:
        """
        Plain (P3) PPM text. Each channel is clamped to 0..255 and no line is
        longer than 70 characters.
        """
        lines = ["P3", f"{self.width} {self.height}", "255"]
        values = clamp_to_uint8(self.pixels)
        for row in values:
            line = ""
            for value in row.reshape(-1):
                token = str(int(value))
                if len(line) + 1 + len(token) > PPM_LINE_LENGTH:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}" if line else token
            if line:
                lines.append(line)
        return "\n".join(lines) + "\n"

    def to_image(self, exposure: float = None) -> Image.Image:
        """
        8-bit Pillow image. Without an exposure the values are clamped,
        otherwise Reinhard tone mapping is applied at that exposure.
        """
        if exposure is None:
            data = clamp_to_uint8(self.pixels)
        else:
            data = reinhard_tone_mapping(self.pixels, exposure=exposure)
        return Image.fromarray(np.ascontiguousarray(data))

    def save(self, path, exposure: float = None):
        path = str(path)
        if path.lower().endswith(".ppm"):
            with open(path, "w") as f:
                f.write(self.to_ppm())
        else:
            self.to_image(exposure).save(path)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"
