import numpy as np


def _check_size(size: int):
    if size < 0:
        raise ValueError(f"Array size must be non-negative, got {size}")


def generate_sorted_array(size: int, rng: np.random.Generator | None = None) -> list[int]:
    """
    Generates a sorted array of `size` uniformly distributed integers in [1, 10 * size].

    Without an explicit generator a fresh one is seeded from OS entropy, so
    repeated runs produce different arrays. Pass a seeded generator for
    reproducible output.
    """
    _check_size(size)
    if rng is None:
        rng = np.random.default_rng()
    if size == 0:
        return []

    values = rng.integers(1, size * 10, size=size, endpoint=True)
    values.sort()
    return values.tolist()


def generate_skewed_array(size: int, rng: np.random.Generator | None = None) -> list[int]:
    """
    Generates a sorted array of exponentially distributed integers.

    Most keys are packed near the low end with a long sparse tail, which is the
    kind of input where interpolation search degrades towards a linear scan.
    """
    _check_size(size)
    if rng is None:
        rng = np.random.default_rng()
    if size == 0:
        return []

    # Scale so the bulk of the keys spans roughly the same range as the uniform generator
    values = np.floor(rng.exponential(scale=size, size=size)).astype(np.int64) + 1
    values.sort()
    return values.tolist()


GENERATORS = {
    "uniform": generate_sorted_array,
    "skewed": generate_skewed_array,
}
