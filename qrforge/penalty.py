"""Penalty scores used to choose the mask that gives the most readable symbol."""

from __future__ import annotations

from collections.abc import Callable

from qrforge.canvas import EMPTY, Canvas, Module
from qrforge.masking import patterns_for
from qrforge.types import Color

_FINDER_LIKE: tuple[Color, ...] = (
    Color.DARK,
    Color.LIGHT,
    Color.DARK,
    Color.DARK,
    Color.DARK,
    Color.LIGHT,
    Color.DARK,
)


def _line_getter(canvas: Canvas, i: int, is_horizontal: bool) -> Callable[[int], Module]:
    if is_horizontal:
        return lambda k: canvas.get(k, i)
    return lambda k: canvas.get(i, k)


def adjacent_penalty_score(canvas: Canvas, is_horizontal: bool) -> int:
    """Penalty for runs of identical modules in a row or column.

    Every run of 5+N identical modules scores 3+N points.
    """
    total = 0
    for i in range(canvas.width):
        get = _line_getter(canvas, i, is_horizontal)
        last = EMPTY
        run = 1
        for module in [*(get(j) for j in range(canvas.width)), EMPTY]:
            if module == last:
                run += 1
                continue
            last = module
            if run >= 5:
                total += run - 2
            run = 1
    return total


def block_penalty_score(canvas: Canvas) -> int:
    """Penalty of 3 points for every 2x2 block of identical modules."""
    total = 0
    for i in range(canvas.width - 1):
        for j in range(canvas.width - 1):
            here = canvas.get(i, j)
            if (
                here == canvas.get(i + 1, j)
                and here == canvas.get(i, j + 1)
                and here == canvas.get(i + 1, j + 1)
            ):
                total += 3
    return total


def finder_penalty_score(canvas: Canvas, is_horizontal: bool) -> int:
    """Penalty of 40 points for each finder-like pattern outside the finders.

    The three real finder patterns always match, so their share is taken off.
    """
    total = 0
    width = canvas.width
    for i in range(width):
        module_at = _line_getter(canvas, i, is_horizontal)

        def color_at(k: int) -> Color:
            return module_at(k).color()

        def not_light(k: int) -> bool:
            return 0 <= k < width and color_at(k) is not Color.LIGHT

        for j in range(width - 6):
            if tuple(color_at(k) for k in range(j, j + 7)) != _FINDER_LIKE:
                continue
            before = any(not_light(k) for k in range(j - 4, j))
            after = any(not_light(k) for k in range(j + 7, j + 11))
            if not before or not after:
                total += 40
    return total - 360


def balance_penalty_score(canvas: Canvas) -> int:
    """Penalty growing linearly with the deviation from 50% dark modules."""
    dark = sum(1 for module in canvas.modules if module.is_dark())
    ratio = dark * 200 // len(canvas.modules)
    return abs(ratio - 100)


def light_side_penalty_score(canvas: Canvas) -> int:
    """Penalty for light modules on the right and bottom edges (Micro QR code)."""
    h = sum(1 for j in range(1, canvas.width) if not canvas.get(j, -1).is_dark())
    v = sum(1 for j in range(1, canvas.width) if not canvas.get(-1, j).is_dark())
    return h + v + 15 * max(h, v)


def total_penalty_score(canvas: Canvas) -> int:
    """The total penalty; a symbol with a higher score is less desirable."""
    version = canvas.version
    if version.is_normal():
        return (
            adjacent_penalty_score(canvas, True)
            + adjacent_penalty_score(canvas, False)
            + block_penalty_score(canvas)
            + finder_penalty_score(canvas, True)
            + finder_penalty_score(canvas, False)
            + balance_penalty_score(canvas)
        )
    if version.is_micro():
        return light_side_penalty_score(canvas)
    return 0


def apply_best_mask(canvas: Canvas) -> Canvas:
    """A masked copy of ``canvas`` using the mask with the lowest penalty."""

    def masked(pattern) -> Canvas:
        candidate = canvas.copy()
        candidate.apply_mask(pattern)
        return candidate

    return min((masked(p) for p in patterns_for(canvas.version)), key=total_penalty_score)