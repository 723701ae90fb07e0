# core/matrix.py
import numpy as np
from core.errors import NonInvertibleTransformError
from core.utils import EPSILON
from core.vector import Tuple

# Determinants smaller than this are treated as singular.
SINGULAR_THRESHOLD = 1e-12


class Matrix4:
    """
    A 4x4 transformation matrix.

    The numpy array is the source of truth; the rows are also cached as plain
    Python floats because transforming a single tuple is far cheaper that way
    than through a numpy call. Matrices are never mutated after construction,
    so the inverse is computed once and memoised.
    """
    def __init__(self, data=None):
        if data is None:
            data = np.identity(4)
        self.data = np.array(data, dtype=np.float64).reshape(4, 4)
        self.data.flags.writeable = False
        self._rows = tuple(tuple(float(v) for v in row) for row in self.data)
        self._inverse = None

    @classmethod
    def identity(cls) -> "Matrix4":
        return cls()

    def __getitem__(self, index):
        row, col = index
        return self._rows[row][col]

    def __mul__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4(self.data @ other.data)
        if isinstance(other, Tuple):
            (a, b, c, d), (e, f, g, h), (i, j, k, l), (m, n, o, p) = self._rows
            x, y, z, w = other.x, other.y, other.z, other.w
            return Tuple(a * x + b * y + c * z + d * w,
                         e * x + f * y + g * z + h * w,
                         i * x + j * y + k * z + l * w,
                         m * x + n * y + o * z + p * w)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.allclose(self.data, other.data, rtol=0.0, atol=EPSILON))

    __hash__ = None

    def transpose(self) -> "Matrix4":
        return Matrix4(self.data.T)

    def determinant(self) -> float:
        return float(np.linalg.det(self.data))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) > SINGULAR_THRESHOLD

    def inverse(self) -> "Matrix4":
        if self._inverse is None:
            if not self.is_invertible():
                raise NonInvertibleTransformError(f"Matrix is not invertible:\n{self.data}")
            inverse = Matrix4(np.linalg.inv(self.data))
            inverse._inverse = self
            self._inverse = inverse
        return self._inverse

    def __getstate__(self):
        # The cached inverse points back at this matrix; rebuild it lazily.
        return {"data": np.array(self.data)}

    def __setstate__(self, state):
        self.__init__(state["data"])

    def __repr__(self) -> str:
        return f"Matrix4({self.data.tolist()})"


IDENTITY = Matrix4.identity()
