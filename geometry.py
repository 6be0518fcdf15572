import numbers

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self):
        for name in ('x', 'y'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f'{name} must be an integer, got {value!r}')
            # numpy integers would overflow in cross products
            object.__setattr__(self, name, int(value))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))


@dataclass(frozen=True, eq=False)
class Cell(Point):
    """
    Point tagged with a region id.
    Equality and hashing still use coordinates only.
    """
    id: int


class Turn(Enum):
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1


def cross(a: Point, b: Point, c: Point) -> int:
    """
    Cross product of segments ab and ac.
    Coordinates are Python ints, so the result is exact for any input range.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def turn(a: Point, b: Point, c: Point) -> Turn:
    """
    Direction of the turn made when traversing a -> b -> c.
    """
    product = cross(a, b, c)
    if product > 0:
        return Turn.COUNTER_CLOCKWISE
    elif product < 0:
        return Turn.CLOCKWISE
    return Turn.COLLINEAR


def lowest_point(points: Iterable[Point]) -> Point:
    """
    Point with the lowest y coordinate, ties broken by the lowest x.
    """
    lowest = None
    for p in points:
        if lowest is None or p.y < lowest.y or (p.y == lowest.y and p.x < lowest.x):
            lowest = p
    if lowest is None:
        raise ValueError('lowest_point() arg is an empty collection')
    return lowest


def squared_distance(a: Point, b: Point) -> int:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2
