# renderer/cpu_kernels.py

import math
import numpy as np
from numba import njit, prange
from core.color import QUANTIZE_SCALE

@njit(parallel=True)
def sky_gradient_kernel(out, pixel00, delta_u, delta_v, center, white, sky_blue):
    """
    Fills out[j, i] with the quantized sky gradient seen through pixel (i, j).

    Rows are independent, so they are split across threads with prange; every
    row writes only its own slice of the buffer, which keeps the final image
    in row-major order regardless of scheduling.

    Parameters:
        out (uint8[height, width, 3]): Output image
        pixel00 (float64[3]): Center of the top-left pixel
        delta_u, delta_v (float64[3]): Step to the next column / row
        center (float64[3]): Camera center (ray origin)
        white, sky_blue (float64[3]): Gradient endpoints
    """
    height = out.shape[0]
    width = out.shape[1]
    for j in prange(height):
        for i in range(width):
            dx = pixel00[0] + i * delta_u[0] + j * delta_v[0] - center[0]
            dy = pixel00[1] + i * delta_u[1] + j * delta_v[1] - center[1]
            dz = pixel00[2] + i * delta_u[2] + j * delta_v[2] - center[2]
            length = math.sqrt(dx * dx + dy * dy + dz * dz)
            unit_y = dy / length if length > 0.0 else 0.0
            a = 0.5 * (unit_y + 1.0)
            for c in range(3):
                value = (1.0 - a) * white[c] + a * sky_blue[c]
                value = min(1.0, max(0.0, value))
                out[j, i, c] = int(QUANTIZE_SCALE * value)

def as_array(v) -> np.ndarray:
    return np.array([v.x, v.y, v.z], dtype=np.float64)
