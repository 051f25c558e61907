# core/ray.py
from core.vector import Point3, Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction does not have to be unit length.
    """
    def __init__(self, origin: Point3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    @classmethod
    def default(cls) -> "Ray":
        """
        A ray from the origin along +x.
        """
        return cls(Point3.zero(), Vector3(1.0, 0.0, 0.0))

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + t * self.direction

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
