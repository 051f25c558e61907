# renderer/raytracer.py
import sys
from typing import Iterator
import numpy as np
from camera.camera import Camera
from core.color import Color
from core.vector import Vector3
from renderer.background import ray_color, WHITE, SKY_BLUE
from renderer.cpu_kernels import sky_gradient_kernel, as_array

class Renderer:
    """
    Samples one ray per pixel through the camera and colors it with the
    sky gradient. Pixels always come out row-major, top row first.
    """
    def __init__(self, camera: Camera, verbose: bool = False):
        self.camera = camera
        self.width = camera.image_width
        self.height = camera.image_height
        self.verbose = verbose

    def log_progress(self, j: int):
        # stdout carries the image, progress goes to stderr
        if self.verbose:
            print(f"Scanlines remaining: {self.height - j}", file=sys.stderr, flush=True)

    def pixels(self) -> Iterator[Color]:
        """Yields the color of every pixel, left to right, top to bottom."""
        for j in range(self.height):
            self.log_progress(j)
            for i in range(self.width):
                yield ray_color(self.camera.get_ray(i, j))
        if self.verbose:
            print("Done.", file=sys.stderr, flush=True)

    def render_buffer(self, parallel: bool = False) -> np.ndarray:
        """
        Renders the whole image into a (height, width, 3) uint8 array.
        With parallel=True the rows are computed by the numba kernel.
        """
        buffer = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        if parallel:
            if self.verbose:
                print(f"Rendering {self.width}x{self.height} in parallel...", file=sys.stderr, flush=True)
            cam = self.camera
            sky_gradient_kernel(buffer,
                                as_array(cam.pixel00_loc),
                                as_array(cam.pixel_delta_u),
                                as_array(cam.pixel_delta_v),
                                as_array(cam.center),
                                as_array(WHITE),
                                as_array(SKY_BLUE))
            return buffer

        for index, color in enumerate(self.pixels()):
            j, i = divmod(index, self.width)
            buffer[j, i] = color.as_tuple()
        return buffer

def calibration_pattern(width: int, height: int) -> Iterator[Color]:
    """
    Red/green calibration image: red grows left to right, green top to
    bottom, blue stays zero. Useful for checking a viewer's orientation.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    for j in range(height):
        for i in range(width):
            r = i / (width - 1) if width > 1 else 0.0
            g = j / (height - 1) if height > 1 else 0.0
            yield Color.from_normalized(Vector3(r, g, 0.0))
