"""Placement of the fixed patterns and the order in which data modules are filled."""

from __future__ import annotations

from collections.abc import Iterator

from qrforge.types import QrError, Version

# Centre coordinates of the alignment patterns for QR code versions 7 to 40.
# The symbol is symmetric, so one list serves for both axes.
_NORMAL_ALIGNMENT_POSITIONS: tuple[tuple[int, ...], ...] = (
    (6, 22, 38),
    (6, 24, 42),
    (6, 26, 46),
    (6, 28, 50),
    (6, 30, 54),
    (6, 32, 58),
    (6, 34, 62),
    (6, 26, 46, 66),
    (6, 26, 48, 70),
    (6, 26, 50, 74),
    (6, 30, 54, 78),
    (6, 30, 56, 82),
    (6, 30, 58, 86),
    (6, 34, 62, 90),
    (6, 28, 50, 72, 94),
    (6, 26, 50, 74, 98),
    (6, 30, 54, 78, 102),
    (6, 28, 54, 80, 106),
    (6, 32, 58, 84, 110),
    (6, 30, 58, 86, 114),
    (6, 34, 62, 90, 118),
    (6, 26, 50, 74, 98, 122),
    (6, 30, 54, 78, 102, 126),
    (6, 26, 52, 78, 104, 130),
    (6, 30, 56, 82, 108, 134),
    (6, 34, 60, 86, 112, 138),
    (6, 30, 58, 86, 114, 142),
    (6, 34, 62, 90, 118, 146),
    (6, 30, 54, 78, 102, 126, 150),
    (6, 24, 50, 76, 102, 128, 154),
    (6, 28, 54, 80, 106, 132, 158),
    (6, 32, 58, 84, 110, 136, 162),
    (6, 26, 54, 82, 110, 138, 166),
    (6, 30, 58, 86, 114, 142, 170),
)

# x-coordinates of the alignment patterns of rMQR codes, indexed by the
# position of the symbol width among 27, 43, 59, 77, 99 and 139. The same
# columns are used at the top and at the bottom of the symbol.
_RMQR_ALIGNMENT_POSITIONS: tuple[tuple[int, ...], ...] = (
    (),
    (21,),
    (19, 39),
    (25, 51),
    (23, 49, 75),
    (27, 55, 83, 111),
)


def alignment_positions(version: Version) -> tuple[int, ...]:
    """Centre coordinates of the alignment patterns of ``version``.

    For QR code versions 7 to 40 this is the standard table, used for both
    axes. Versions 2 to 6 have one pattern in the bottom-right area, so the
    single coordinate ``width - 7`` is returned. Version 1 and Micro QR codes
    have none. For rMQR codes the x-coordinates of the columns are returned.
    """
    if version.is_rect_micro():
        return _RMQR_ALIGNMENT_POSITIONS[version.rect_micro_width_index()]
    if version.is_micro() or version.number == 1:
        return ()
    if version.number <= 6:
        return (version.width() - 7,)
    return _NORMAL_ALIGNMENT_POSITIONS[version.number - 7]


def is_functional(version: Version, width: int, x: int, y: int) -> bool:
    """Whether the module at (x, y) belongs to a functional pattern.

    Negative coordinates wrap around. rMQR codes are not supported.
    """
    if version.is_rect_micro():
        raise QrError("functional module lookup is not defined for rMQR codes")
    if width != version.width():
        raise ValueError(f"width {width} does not match {version!r}")

    if x < 0:
        x += width
    if y < 0:
        y += width

    if version.is_micro():
        return x == 0 or y == 0 or (x < 9 and y < 9)

    timing_patterns = x == 6 or y == 6
    top_left_finder = x < 9 and y < 9
    bottom_left_finder = x < 9 and y >= width - 8
    top_right_finder = x >= width - 8 and y < 9
    if timing_patterns or top_left_finder or bottom_left_finder or top_right_finder:
        return True

    number = version.number
    if number == 1:
        return False
    if number <= 6:
        return abs(width - 7 - x) <= 2 and abs(width - 7 - y) <= 2

    positions = _NORMAL_ALIGNMENT_POSITIONS[number - 7]
    last = len(positions) - 1
    for i, align_x in enumerate(positions):
        for j, align_y in enumerate(positions):
            # These three overlap the finder patterns and are never drawn.
            if (i == 0 and j in (0, last)) or (i == last and j == 0):
                continue
            if abs(align_x - x) <= 2 and abs(align_y - y) <= 2:
                return True
    return False


def data_module_coords(version: Version) -> Iterator[tuple[int, int]]:
    """Yield the (x, y) coordinates in the order data bits are placed.

    The walk goes in two-module-wide columns from the right, alternately
    upwards and downwards, skipping the vertical timing pattern column. It
    covers functional modules too; the caller skips the ones already drawn.
    """
    if version.is_rect_micro():
        # Disregarding the bottom row and right column works for rMQR codes.
        width, height = version.width() - 1, version.height() - 1
    else:
        width, height = version.width(), version.height()
    timing_column = 6 if version.is_normal() else 0

    x, y = width - 1, height - 1
    while True:
        ref_column = x + 1 if x <= timing_column else x
        if ref_column <= 0:
            return
        yield (x, y)

        column_type = (width - ref_column) % 4
        if column_type == 2 and y > 0:
            y -= 1
            x += 1
        elif column_type == 0 and y < height - 1:
            y += 1
            x += 1
        elif column_type in (0, 2) and x == timing_column + 1:
            x -= 2
        else:
            x -= 1