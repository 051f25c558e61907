# main.py
import sys
from typing import TextIO
from camera.camera import Camera, CameraSettings
from renderer.raytracer import Renderer
from renderer.ppm import open_sink, write_ppm

def render_to(stream: TextIO, settings: CameraSettings = None,
              parallel: bool = False, verbose: bool = True) -> int:
    """
    Renders the sky gradient for the given settings and writes it to stream
    as a P3 image. Returns the number of pixels written.
    """
    camera = Camera(settings)
    renderer = Renderer(camera, verbose=verbose)
    if parallel:
        pixels = renderer.render_buffer(parallel=True)
    else:
        pixels = renderer.pixels()
    with open_sink(stream) as sink:
        return write_ppm(sink, renderer.width, renderer.height, pixels)

def main():
    try:
        render_to(sys.stdout)
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); the image is incomplete.
        print("Output closed before the image was complete.", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
