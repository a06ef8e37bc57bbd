import math
from typing import Tuple, Any, Optional, Iterable, List
import numpy as np

Point = Tuple[float, float]


class Matrix:
    """
    A 3x3 affine transformation matrix for figure geometry.

    Points are column vectors (x, y, 1), so `m @ p` maps a point. The
    bottom row is always (0, 0, 1) for matrices built by the factory
    methods, but any 3x3 array is accepted.
    """

    def __init__(self, data: Any = None):
        """
        Args:
            data: Another Matrix, a 3x3 list/tuple, a 3x3 numpy array, or
                  None for the identity.
        """
        if data is None:
            self.m: np.ndarray = np.identity(3, dtype=float)
        elif isinstance(data, Matrix):
            self.m = data.m.copy()
        else:
            try:
                self.m = np.array(data, dtype=float)
            except (ValueError, TypeError) as e:
                raise ValueError(f"Could not create Matrix from data: {e}")
            if self.m.shape != (3, 3):
                raise ValueError("Input data must be a 3x3 matrix.")

    @classmethod
    def from_affine(
        cls,
        m00: float,
        m10: float,
        m01: float,
        m11: float,
        m02: float,
        m12: float,
    ) -> "Matrix":
        """
        Builds a matrix from the six affine coefficients, in the column
        order used by most 2D graphics APIs:

            x' = m00 * x + m01 * y + m02
            y' = m10 * x + m11 * y + m12
        """
        return cls([[m00, m01, m02], [m10, m11, m12], [0, 0, 1]])

    def __matmul__(self, other: "Matrix") -> "Matrix":
        """
        Composes two transforms. `(A @ B)` applied to a point is the same
        as applying B first, then A.
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(np.dot(self.m, other.m))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return False
        return np.allclose(self.m, other.m)

    def __repr__(self) -> str:
        return f"Matrix({self.m.tolist()})"

    def __copy__(self) -> "Matrix":
        return Matrix(self)

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return Matrix(self)

    def copy(self) -> "Matrix":
        return Matrix(self)

    @staticmethod
    def identity() -> "Matrix":
        return Matrix()

    def is_identity(self) -> bool:
        return np.allclose(self.m, np.identity(3))

    @staticmethod
    def translation(tx: float, ty: float) -> "Matrix":
        return Matrix([[1, 0, tx], [0, 1, ty], [0, 0, 1]])

    @staticmethod
    def scale(
        sx: float, sy: float, center: Optional[Point] = None
    ) -> "Matrix":
        """
        Creates a scaling matrix, optionally about `center` instead of
        the origin.
        """
        m = Matrix([[sx, 0, 0], [0, sy, 0], [0, 0, 1]])
        if center:
            return _about(m, center)
        return m

    @staticmethod
    def rotation(angle_deg: float, center: Optional[Point] = None) -> "Matrix":
        """
        Creates a rotation matrix. Positive angles turn +x toward +y,
        which is clockwise on a y-down canvas.
        """
        angle_rad = math.radians(angle_deg)
        c = math.cos(angle_rad)
        s = math.sin(angle_rad)
        m = Matrix([[c, -s, 0], [s, c, 0], [0, 0, 1]])
        if center:
            return _about(m, center)
        return m

    @staticmethod
    def shear(shx: float, shy: float) -> "Matrix":
        return Matrix([[1, shx, 0], [shy, 1, 0], [0, 0, 1]])

    def invert(self) -> "Matrix":
        """
        Returns the inverse transform. Raises `numpy.linalg.LinAlgError`
        for singular matrices such as a zero scale.
        """
        return Matrix(np.linalg.inv(self.m))

    def transform_point(self, point: Point) -> Point:
        vec = np.array([point[0], point[1], 1.0])
        res = np.dot(self.m, vec)
        return (float(res[0]), float(res[1]))

    def transform_points(self, points: Iterable[Point]) -> List[Point]:
        pts = np.array(list(points), dtype=float).reshape(-1, 2)
        if not len(pts):
            return []
        homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
        res = homogeneous @ self.m.T
        return [(float(x), float(y)) for x, y in res[:, :2]]


def _about(m: Matrix, center: Point) -> Matrix:
    cx, cy = center
    return Matrix.translation(cx, cy) @ m @ Matrix.translation(-cx, -cy)
