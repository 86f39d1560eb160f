"""Grid geometry helpers shared by the engine and the analysis tools."""

from typing import Dict, List, Set, Tuple

# Module-level cache: (width, height) -> {(x,y): ((nx,ny), ...), ...}
_NEIGHBORHOODS_CACHE: Dict[
    Tuple[int, int],
    Dict[Tuple[int, int], Tuple[Tuple[int, int], ...]]
] = {}


def get_neighborhoods(
    width: int, height: int
) -> Dict[Tuple[int, int], Tuple[Tuple[int, int], ...]]:
    """
    Precompute and cache 8-connected neighbor coordinates for every cell in a grid.

    Args:
        width: Grid width (number of columns). Must be positive.
        height: Grid height (number of rows). Must be positive.

    Returns:
        Mapping from each cell (x, y) to a tuple of valid neighboring
        coordinates (nx, ny) under 8-connectivity.

    Raises:
        ValueError: If width or height is non-positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive.")

    key = (width, height)
    cached = _NEIGHBORHOODS_CACHE.get(key)
    if cached is not None:
        return cached

    neighborhoods: Dict[Tuple[int, int], Tuple[Tuple[int, int], ...]] = {}
    for x in range(width):
        for y in range(height):
            nbrs: List[Tuple[int, int]] = []
            for dx in (-1, 0, 1):
                for dy in (-1, 0, 1):
                    if dx == 0 and dy == 0:
                        continue
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < width and 0 <= ny < height:
                        nbrs.append((nx, ny))
            neighborhoods[(x, y)] = tuple(nbrs)

    _NEIGHBORHOODS_CACHE[key] = neighborhoods
    return neighborhoods


def safe_block(width: int, height: int, x: int, y: int) -> Set[Tuple[int, int]]:
    """Return the cells within Chebyshev distance 1 of (x, y), clipped to the grid."""
    return set(get_neighborhoods(width, height)[(x, y)]) | {(x, y)}


def in_bounds(width: int, height: int, x: int, y: int) -> bool:
    return 0 <= x < width and 0 <= y < height
