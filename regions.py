import logging

from typing import Iterable

from geometry import Cell, Point
from graham_scan import GrahamScan, HullConfig, InsufficientPointsError

logger = logging.getLogger(__name__)


def group_by_id(cells: Iterable[Cell]) -> dict[int, list[Cell]]:
    """
    Split tagged cells into regions, keeping input order inside each region.
    """
    regions: dict[int, list[Cell]] = {}
    for cell in cells:
        regions.setdefault(cell.id, []).append(cell)
    return regions


def region_hulls(cells: Iterable[Cell], config: HullConfig | None = None) -> dict[int, list[Point]]:
    """
    Convex hull of every region. Regions with fewer than 3 unique
    cells have no hull and are left out of the result.
    """
    builder = GrahamScan(config)
    hulls = {}
    for region_id, region in group_by_id(cells).items():
        try:
            hulls[region_id] = builder.compute_hull(region)
        except InsufficientPointsError as e:
            logger.warning('Skipping region %s: %s', region_id, e)
    return hulls
