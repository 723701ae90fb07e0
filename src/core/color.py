# core/color.py
from core.utils import float_equal


class Color:
    """
    Linear RGB color. Channels are not clamped; the canvas export does that.
    """
    def __init__(self, red: float, green: float, blue: float):
        self.red = red
        self.green = green
        self.blue = blue

    @classmethod
    def from_hex(cls, code: str) -> "Color":
        code = code.lstrip("#")
        if len(code) != 6:
            raise ValueError(f"Expected a 6 digit hex color, got {code!r}")
        return cls(int(code[0:2], 16) / 255.0,
                   int(code[2:4], 16) / 255.0,
                   int(code[4:6], 16) / 255.0)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        # Hadamard product
        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Color":
        return Color(self.red / t, self.green / t, self.blue / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (float_equal(self.red, other.red) and float_equal(self.green, other.green)
                and float_equal(self.blue, other.blue))

    __hash__ = None

    def as_tuple(self):
        return (self.red, self.green, self.blue)

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
