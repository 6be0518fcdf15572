import logging
import numpy as np

from os import PathLike

from geometry import Cell, Point

logger = logging.getLogger(__name__)


def parse_point(line: str) -> Point:
    """
    Parse 'x y' into a Point or 'x y id' into a Cell.
    """
    fields = line.split()
    if len(fields) not in (2, 3):
        raise ValueError(f'expected "x y" or "x y id", got {line!r}')
    try:
        values = [int(v) for v in fields]
    except ValueError:
        raise ValueError(f'coordinates must be integers, got {line!r}') from None
    if len(values) == 3:
        return Cell(*values)
    return Point(*values)


def load_points(path: str | PathLike) -> list[Point]:
    """
    Read points from a text file: the point count on the first line,
    then one point per line. Blank lines are ignored.
    """
    with open(path, 'r', encoding='utf-8') as f:
        lines = [(lineno, line.strip()) for lineno, line in enumerate(f, start=1)]
    lines = [(lineno, line) for lineno, line in lines if line]
    if not lines:
        raise ValueError(f'{path}: file is empty')

    try:
        n = int(lines[0][1])
    except ValueError:
        raise ValueError(f'{path}:{lines[0][0]}: expected point count, got {lines[0][1]!r}') from None
    if n < 0:
        raise ValueError(f'{path}:{lines[0][0]}: negative point count {n}')
    if len(lines) - 1 < n:
        raise ValueError(f'{path}: expected {n} points, found {len(lines) - 1}')

    points = []
    for lineno, line in lines[1:n + 1]:
        try:
            points.append(parse_point(line))
        except ValueError as e:
            raise ValueError(f'{path}:{lineno}: {e}') from None

    logger.debug('Loaded %d points from %s', len(points), path)
    return points


def save_points(path: str | PathLike, points: list[Point]):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(f'{len(points)}\n')
        for p in points:
            if isinstance(p, Cell):
                f.write(f'{p.x} {p.y} {p.id}\n')
            else:
                f.write(f'{p.x} {p.y}\n')


def generate_random_points(n: int, low: int, high: int, seed: int | None = None) -> list[Point]:
    """
    Uniformly distributed integer points in the square [low, high] x [low, high].
    """
    rng = np.random.default_rng(seed)
    xs = rng.integers(low, high, size=n, endpoint=True)
    ys = rng.integers(low, high, size=n, endpoint=True)
    return [Point(int(x), int(y)) for x, y in zip(xs, ys)]
