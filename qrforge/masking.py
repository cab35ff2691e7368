"""Mask patterns and the format information that records the chosen mask."""

from __future__ import annotations

import enum
from collections.abc import Callable

from qrforge.types import EcLevel, QrError, Version


class MaskPattern(enum.IntEnum):
    """The mask patterns, named by shape.

    QR code and Micro QR code number their masks differently, so the value
    is the QR code pattern number.
    """

    CHECKERBOARD = 0b000
    HORIZONTAL_LINES = 0b001
    VERTICAL_LINES = 0b010
    DIAGONAL_LINES = 0b011
    LARGE_CHECKERBOARD = 0b100
    FIELDS = 0b101
    DIAMONDS = 0b110
    MEADOW = 0b111


MaskFunction = Callable[[int, int], bool]


def _checkerboard(x: int, y: int) -> bool:
    return (x + y) % 2 == 0


def _horizontal_lines(x: int, y: int) -> bool:
    return y % 2 == 0


def _vertical_lines(x: int, y: int) -> bool:
    return x % 3 == 0


def _diagonal_lines(x: int, y: int) -> bool:
    return (x + y) % 3 == 0


def _large_checkerboard(x: int, y: int) -> bool:
    return (y // 2 + x // 3) % 2 == 0


def _fields(x: int, y: int) -> bool:
    return (x * y) % 2 + (x * y) % 3 == 0


def _diamonds(x: int, y: int) -> bool:
    return ((x * y) % 2 + (x * y) % 3) % 2 == 0


def _meadow(x: int, y: int) -> bool:
    return ((x + y) % 2 + (x * y) % 3) % 2 == 0


_MASK_FUNCTIONS: dict[MaskPattern, MaskFunction] = {
    MaskPattern.CHECKERBOARD: _checkerboard,
    MaskPattern.HORIZONTAL_LINES: _horizontal_lines,
    MaskPattern.VERTICAL_LINES: _vertical_lines,
    MaskPattern.DIAGONAL_LINES: _diagonal_lines,
    MaskPattern.LARGE_CHECKERBOARD: _large_checkerboard,
    MaskPattern.FIELDS: _fields,
    MaskPattern.DIAMONDS: _diamonds,
    MaskPattern.MEADOW: _meadow,
}


def mask_function(pattern: MaskPattern) -> MaskFunction:
    """The predicate telling whether the module at (x, y) is inverted."""
    return _MASK_FUNCTIONS[MaskPattern(pattern)]


_FORMAT_INFOS_QR: tuple[int, ...] = (
    0x5412, 0x5125, 0x5E7C, 0x5B4B, 0x45F9, 0x40CE, 0x4F97, 0x4AA0,
    0x77C4, 0x72F3, 0x7DAA, 0x789D, 0x662F, 0x6318, 0x6C41, 0x6976,
    0x1689, 0x13BE, 0x1CE7, 0x19D0, 0x0762, 0x0255, 0x0D0C, 0x083B,
    0x355F, 0x3068, 0x3F31, 0x3A06, 0x24B4, 0x2183, 0x2EDA, 0x2BED,
)

_FORMAT_INFOS_MICRO_QR: tuple[int, ...] = (
    0x4445, 0x4172, 0x4E2B, 0x4B1C, 0x55AE, 0x5099, 0x5FC0, 0x5AF7,
    0x6793, 0x62A4, 0x6DFD, 0x68CA, 0x7678, 0x734F, 0x7C16, 0x7921,
    0x06DE, 0x03E9, 0x0CB0, 0x0987, 0x1735, 0x1202, 0x1D5B, 0x186C,
    0x2508, 0x203F, 0x2F66, 0x2A51, 0x34E3, 0x31D4, 0x3E8D, 0x3BBA,
)

_MICRO_PATTERN_NUMBERS: dict[MaskPattern, int] = {
    MaskPattern.HORIZONTAL_LINES: 0b00,
    MaskPattern.LARGE_CHECKERBOARD: 0b01,
    MaskPattern.DIAMONDS: 0b10,
    MaskPattern.MEADOW: 0b11,
}

_MICRO_SYMBOL_NUMBERS: dict[tuple[int, EcLevel], int] = {
    (1, EcLevel.L): 0b000,
    (2, EcLevel.L): 0b001,
    (2, EcLevel.M): 0b010,
    (3, EcLevel.L): 0b011,
    (3, EcLevel.M): 0b100,
    (4, EcLevel.L): 0b101,
    (4, EcLevel.M): 0b110,
    (4, EcLevel.Q): 0b111,
}


def format_info_number(
    version: Version, ec_level: EcLevel, pattern: MaskPattern
) -> int | None:
    """The 15-bit format information for the given symbol and mask.

    rMQR codes carry no format information, so ``None`` is returned for
    them. Raises ``QrError`` when the mask or level is not allowed in a
    Micro QR code.
    """
    pattern = MaskPattern(pattern)
    ec_level = EcLevel(ec_level)
    if version.is_rect_micro():
        return None
    if version.is_normal():
        return _FORMAT_INFOS_QR[((ec_level ^ 1) << 3) | pattern]

    micro_pattern = _MICRO_PATTERN_NUMBERS.get(pattern)
    if micro_pattern is None:
        raise QrError(f"mask pattern {pattern.name} is not supported in Micro QR code")
    symbol_number = _MICRO_SYMBOL_NUMBERS.get((version.number, ec_level))
    if symbol_number is None:
        raise QrError(
            f"error correction level {ec_level.name} is not supported in {version!r}"
        )
    return _FORMAT_INFOS_MICRO_QR[(symbol_number << 2) | micro_pattern]


_ALL_PATTERNS_QR: tuple[MaskPattern, ...] = tuple(MaskPattern)
_ALL_PATTERNS_MICRO_QR: tuple[MaskPattern, ...] = tuple(_MICRO_PATTERN_NUMBERS)
_ALL_PATTERNS_RMQR: tuple[MaskPattern, ...] = (MaskPattern.LARGE_CHECKERBOARD,)


def patterns_for(version: Version) -> tuple[MaskPattern, ...]:
    """The mask patterns a symbol of ``version`` may use, in trial order."""
    if version.is_normal():
        return _ALL_PATTERNS_QR
    if version.is_micro():
        return _ALL_PATTERNS_MICRO_QR
    return _ALL_PATTERNS_RMQR