"""Column-major two-dimensional lists."""


def matrix(width, height, generator=None):
    """Build `width` columns of `height` entries each.

    Entry [i][j] is generator(i, j), or None without a generator.
    Raises ValueError when width or height is lower than 1.
    """
    if width < 1 or height < 1:
        raise ValueError("The width and height of a matrix need to be positive values")
    return [
        [generator(i, j) if generator else None for j in range(height)]
        for i in range(width)
    ]
