# camera/camera.py
import math
from dataclasses import dataclass, field
from core.vector import Vector3, Point3
from core.ray import Ray

# Defaults for a render.
ASPECT_RATIO = 16.0 / 9.0
IMAGE_WIDTH = 400
FOCAL_LENGTH = 1.0
VIEWPORT_HEIGHT = 2.0

@dataclass(frozen=True)
class CameraSettings:
    """
    Image and pinhole camera parameters for one render.

    Raises ValueError if any of them would produce a degenerate image.
    """
    aspect_ratio: float = ASPECT_RATIO
    image_width: int = IMAGE_WIDTH
    focal_length: float = FOCAL_LENGTH
    viewport_height: float = VIEWPORT_HEIGHT
    center: Point3 = field(default_factory=Point3.zero)

    def __post_init__(self):
        if isinstance(self.image_width, bool) or not isinstance(self.image_width, int):
            raise ValueError(f"image_width must be an integer, got {self.image_width!r}")
        if self.image_width <= 0:
            raise ValueError(f"image_width must be positive, got {self.image_width}")
        for name in ("aspect_ratio", "focal_length", "viewport_height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive finite number, got {value!r}")

    @property
    def image_height(self) -> int:
        # At least one row, whatever the aspect ratio.
        return max(1, int(self.image_width / self.aspect_ratio))

class Camera:
    """
    Pinhole camera looking down -z. The viewport sits one focal length in
    front of the center and is sampled once per pixel, at the pixel's center.
    """
    def __init__(self, settings: CameraSettings = None):
        self.settings = settings if settings is not None else CameraSettings()
        self.update_camera()

    def update_camera(self):
        """Derives the viewport and per-pixel step vectors from the settings."""
        s = self.settings
        self.center = s.center
        self.image_width = s.image_width
        self.image_height = s.image_height

        # Use the real pixel ratio, the floored height can drift from aspect_ratio.
        viewport_width = s.viewport_height * (float(self.image_width) / self.image_height)

        # Rows grow downward, so v points down the viewport.
        self.viewport_u = Vector3(viewport_width, 0.0, 0.0)
        self.viewport_v = Vector3(0.0, -s.viewport_height, 0.0)

        self.pixel_delta_u = self.viewport_u / self.image_width
        self.pixel_delta_v = self.viewport_v / self.image_height

        self.viewport_upper_left = (self.center
                                    - Vector3(0.0, 0.0, s.focal_length)
                                    - self.viewport_u / 2
                                    - self.viewport_v / 2)
        self.pixel00_loc = self.viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

    def pixel_center(self, i: int, j: int) -> Point3:
        """World position of the center of column i, row j."""
        return self.pixel00_loc + i * self.pixel_delta_u + j * self.pixel_delta_v

    def get_ray(self, i: int, j: int) -> Ray:
        """Ray from the camera center through the center of pixel (i, j)."""
        return Ray(self.center, self.pixel_center(i, j) - self.center)
