# %%
"""Numeric kernels for the bounding box calculations."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import numba
from numba import njit

if TYPE_CHECKING:
    from collections.abc import Callable

    import numpy as np
    import numpy.typing as npt

P = ParamSpec("P")
R = TypeVar("R")

# for easier access
f64 = numba.types.float64
f64_1d = numba.types.float64[:]
Tuple = numba.types.Tuple

Extent = Tuple([f64, f64, f64, f64])

if os.environ.get("COVERAGE_DEBUG", "0") == "1":

    def njit(  # pylint: disable=function-redefined
        *args: Any, **kwargs: Any
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """Dummy decorator if numba is deactivated."""
        del args, kwargs  # as it is just a debug tool, args and kwargs are not used

        def decorator(func: Callable[P, R]) -> Callable[P, R]:
            return func

        return decorator


@njit(Extent(f64_1d, f64_1d))
def points_extent(
    xs: npt.NDArray[np.float64], ys: npt.NDArray[np.float64]
) -> tuple[float, float, float, float]:
    """Get the extent (x, y, width, height) of a non-empty set of points.

    Both arrays must have the same, non-zero length.
    """
    min_x = max_x = xs[0]
    min_y = max_y = ys[0]

    for i in range(1, xs.shape[0]):
        x = xs[i]
        y = ys[i]
        if x < min_x:
            min_x = x
        elif x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        elif y > max_y:
            max_y = y

    return min_x, min_y, max_x - min_x, max_y - min_y


@njit(Extent(f64, f64, f64))
def circle_extent(cx: float, cy: float, r: float) -> tuple[float, float, float, float]:
    """Get the extent of a circle."""
    return cx - r, cy - r, 2 * r, 2 * r


@njit(Extent(f64, f64, f64, f64))
def ellipse_extent(
    cx: float, cy: float, rx: float, ry: float
) -> tuple[float, float, float, float]:
    """Get the extent of an axis-aligned ellipse."""
    return cx - rx, cy - ry, 2 * rx, 2 * ry


@njit(Extent(f64, f64, f64, f64))
def line_extent(
    x1: float, y1: float, x2: float, y2: float
) -> tuple[float, float, float, float]:
    """Get the extent of a line segment."""
    return min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1)
