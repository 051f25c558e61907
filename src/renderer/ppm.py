# renderer/ppm.py
import sys
from contextlib import contextmanager
from typing import Iterable, TextIO, Union
import numpy as np
from core.color import Color

MAX_CHANNEL_VALUE = 255

def format_header(width: int, height: int) -> str:
    """The three header lines of a plain (P3) PPM image."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    return f"P3\n{width} {height}\n{MAX_CHANNEL_VALUE}\n"

def write_ppm(stream: TextIO, width: int, height: int,
              pixels: Union[Iterable[Color], np.ndarray]) -> int:
    """
    Writes a P3 image to stream, one "r g b" line per pixel.

    pixels is either an iterable of Color in row-major order or a
    (height, width, 3) array. Returns the number of pixel lines written and
    raises ValueError if that does not match width * height.
    """
    stream.write(format_header(width, height))

    if isinstance(pixels, np.ndarray):
        if pixels.shape != (height, width, 3):
            raise ValueError(f"Pixel buffer shape {pixels.shape} does not match {height}x{width}x3")
        lines = (f"{r} {g} {b}" for r, g, b in pixels.reshape(-1, 3).tolist())
    else:
        lines = (str(color) for color in pixels)

    count = 0
    for line in lines:
        stream.write(line)
        stream.write("\n")
        count += 1

    if count != width * height:
        raise ValueError(f"Wrote {count} pixels, expected {width * height}")
    return count

@contextmanager
def open_sink(stream: TextIO = None):
    """
    Yields the output stream (stdout by default) and flushes it on the way
    out, also when rendering fails part way.
    """
    sink = stream if stream is not None else sys.stdout
    try:
        yield sink
    finally:
        sink.flush()
