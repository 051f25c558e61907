# renderer/background.py
from core.vector import Vector3, unit_vector
from core.ray import Ray
from core.color import Color

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def lerp(a: float, start: Vector3, end: Vector3) -> Vector3:
    """Linear blend: start at a=0, end at a=1."""
    return (1.0 - a) * start + a * end

def gradient_parameter(direction: Vector3) -> float:
    """
    Maps the vertical component of the normalized direction from [-1, 1]
    onto [0, 1].
    """
    unit = unit_vector(direction)
    return 0.5 * (unit.y + 1.0)

def sky_color(ray: Ray) -> Vector3:
    """Unquantized background color seen along a ray."""
    return lerp(gradient_parameter(ray.direction), WHITE, SKY_BLUE)

def ray_color(ray: Ray) -> Color:
    return Color.from_normalized(sky_color(ray))
