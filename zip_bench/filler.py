import numpy as np

RED = (255, 0, 0)


def unrelated_operation(pixels: int = 1_000_000) -> np.ndarray:
    """CPU-bound work that the benchmark keeps out of its measurement.

    Allocates an RGB buffer of `pixels` black pixels and paints the middle
    one red.
    """
    buffer = np.zeros((pixels, 3), dtype=np.uint8)
    if pixels > 0:
        buffer[pixels // 2] = RED
    return buffer
