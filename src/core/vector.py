# core/vector.py
import math

class Vector3:
    """
    A 3D vector of floats. Used both for directions and for points (see Point3);
    the two are only told apart by how they are used.

    Arithmetic operators return new vectors. The in-place operators (+=, *=, /=)
    mutate the receiver and are meant for local accumulation only.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1.0, 1.0, 1.0)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __imul__(self, t: float) -> "Vector3":
        self.x *= t
        self.y *= t
        self.z *= t
        return self

    def __itruediv__(self, t: float) -> "Vector3":
        self.x /= t
        self.y /= t
        self.z /= t
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None  # mutable through the in-place operators

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def isclose(self, other: "Vector3", tol: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=tol) and
                math.isclose(self.y, other.y, abs_tol=tol) and
                math.isclose(self.z, other.z, abs_tol=tol))

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector in the same direction. A zero-length vector
        has no direction, so the zero vector is returned instead of NaNs.
        """
        l = self.length()
        if l == 0:
            return Vector3.zero()
        return self / l

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

# Positions share the vector type.
Point3 = Vector3

def dot(u: Vector3, v: Vector3) -> float:
    return u.dot(v)

def cross(u: Vector3, v: Vector3) -> Vector3:
    return u.cross(v)

def unit_vector(v: Vector3) -> Vector3:
    return v.normalize()
