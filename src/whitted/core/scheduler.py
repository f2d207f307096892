"""Pixel ordering and work partitioning.

Parallel renders split the image into contiguous bands of rows, one band
per worker. Bands never overlap, so workers write disjoint frame buffer
cells, and each worker walks its band in scan order.
"""

from collections.abc import Iterator


def partition_rows(height: int, workers: int) -> list[range]:
    """Split rows 0..height-1 into contiguous, non-empty bands.

    Band sizes differ by at most one row; earlier bands take the extra
    rows. Never returns more bands than there are rows.

    Args:
        height: Number of image rows.
        workers: Desired number of bands.

    Returns:
        A list of row ranges covering every row exactly once, in order.

    Raises:
        ValueError: If height or workers is less than 1.

    Example:
        >>> partition_rows(10, 3)
        [range(0, 4), range(4, 7), range(7, 10)]
    """
    if height < 1 or workers < 1:
        raise ValueError(f"height and workers must be >= 1, got {height} and {workers}")

    count = min(workers, height)
    base, extra = divmod(height, count)

    bands = []
    start = 0
    for index in range(count):
        size = base + (1 if index < extra else 0)
        bands.append(range(start, start + size))
        start += size
    return bands


def scan_order(width: int, rows: range) -> Iterator[tuple[int, int]]:
    """Yield (x, y) for every pixel of a band, left to right, top to bottom."""
    for y in rows:
        for x in range(width):
            yield x, y
