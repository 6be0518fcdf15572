import logging
import numpy as np

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable

from geometry import Point, Turn, cross, lowest_point, squared_distance, turn

logger = logging.getLogger(__name__)

# float angles closer than this are ordered by the exact cross product
ANGLE_TOLERANCE = 1e-9
# widest integer converted to float without overflow
MAX_FLOAT_BITS = 1000


class HullError(ValueError):
    pass


class InsufficientPointsError(HullError):
    pass


class CollinearPointsError(HullError):
    pass


@dataclass
class HullConfig:
    """Controls how degenerate input is handled."""

    # raise CollinearPointsError instead of returning the sorted points
    strict_collinear: bool = False


def scaled_direction(p: Point, pivot: Point) -> tuple[float, float]:
    """
    Vector from pivot to p as floats. Both components are divided
    by the same power of two when they would not fit into a float.
    """
    dx, dy = p.x - pivot.x, p.y - pivot.y
    shift = max(abs(dx).bit_length(), abs(dy).bit_length()) - MAX_FLOAT_BITS
    if shift <= 0:
        return float(dx), float(dy)
    scale = 1 << shift
    return dx / scale, dy / scale


def polar_angles(points: list[Point], pivot: Point) -> list[float]:
    """
    Approximate angles between the x axis and the rays from pivot to each point.
    """
    directions = [scaled_direction(p, pivot) for p in points]
    dx = np.array([d[0] for d in directions], dtype=float)
    dy = np.array([d[1] for d in directions], dtype=float)
    return np.arctan2(dy, dx).tolist()


def sort_by_polar_angle(points: Iterable[Point], pivot: Point | None = None) -> list[Point]:
    """
    Sort unique points by polar angle around the pivot,
    closest point first when angles are equal.
    Coordinate duplicates are collapsed, the first occurrence is kept.

    Float angles only separate clearly different directions. Near ties
    are resolved with the exact cross product, then by exact squared distance.

    Time complexity: O(n*log(n)).
    """
    points = list(points)
    if not points:
        return []
    if pivot is None:
        pivot = lowest_point(points)

    def compare(item_a, item_b) -> int:
        (angle_a, a), (angle_b, b) = item_a, item_b
        if abs(angle_a - angle_b) > ANGLE_TOLERANCE:
            return -1 if angle_a < angle_b else 1
        orientation = cross(pivot, a, b)
        if orientation != 0:
            return -1 if orientation > 0 else 1
        dist_a = squared_distance(pivot, a)
        dist_b = squared_distance(pivot, b)
        return (dist_a > dist_b) - (dist_a < dist_b)

    items = sorted(zip(polar_angles(points, pivot), points), key=cmp_to_key(compare))

    unique = [items[0]]
    for item in items[1:]:
        if compare(unique[-1], item) == 0:
            assert item[1] == unique[-1][1], (
                f'Distinct points share angle and distance: {unique[-1][1]}, {item[1]}'
            )
            continue
        unique.append(item)
    return [p for _, p in unique]


def are_all_collinear(points: list[Point]) -> bool:
    """
    Checks if every point lies on the line through the first two points.
    """
    if len(points) < 2:
        return True
    a, b = points[0], points[1]
    return all(turn(a, b, c) is Turn.COLLINEAR for c in points[2:])


class GrahamScan:
    def __init__(self, config: HullConfig | None = None):
        self.config = config if config is not None else HullConfig()

    def compute_hull(self, points: Iterable[Point]) -> list[Point]:
        """
        Closed convex hull of a multiset of integer points in counter-clockwise
        order, starting and ending at the lowest (then leftmost) point.
        Collinear points met during the sweep are kept on the boundary.

        If all points are collinear, they are returned in angular order
        without closing the polygon (or CollinearPointsError is raised
        in strict mode).

        Time complexity: O(n*log(n)).
        """
        sorted_points = sort_by_polar_angle(points)
        logger.debug('%d unique points after sorting', len(sorted_points))

        if len(sorted_points) < 3:
            raise InsufficientPointsError(
                f'can only create a convex hull of 3 or more unique points, got {len(sorted_points)}'
            )

        if are_all_collinear(sorted_points):
            if self.config.strict_collinear:
                raise CollinearPointsError('cannot create a convex hull from collinear points')
            logger.debug('all %d points are collinear, returning them unclosed', len(sorted_points))
            return sorted_points

        stack = [sorted_points[0], sorted_points[1]]
        i = 2
        while i < len(sorted_points):
            head = sorted_points[i]
            middle = stack[-1]
            tail = stack[-2]

            if turn(tail, middle, head) is Turn.CLOCKWISE:
                # middle is not a hull vertex, retest head against the new top
                assert len(stack) > 2, f'Pivot {stack[0]} popped from the hull'
                stack.pop()
            else:
                stack.append(head)
                i += 1

        stack.append(sorted_points[0])

        logger.debug('hull has %d vertices', len(stack) - 1)
        return stack


def convex_hull(points: Iterable[Point], config: HullConfig | None = None) -> list[Point]:
    """
    Closed convex hull of points, see GrahamScan.compute_hull.
    """
    return GrahamScan(config).compute_hull(points)
