"""Basic value types shared by the QR code encoder: colors, levels and versions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class QrError(Exception):
    """Base class for every error raised while building a QR code."""


class InvalidVersion(QrError, ValueError):
    """The requested symbol version does not exist."""


class Color(enum.Enum):
    """The color of a module."""

    LIGHT = 0
    DARK = 1

    def __invert__(self) -> Color:
        return Color.DARK if self is Color.LIGHT else Color.LIGHT


class EcLevel(enum.IntEnum):
    """Error correction level, ordered from the weakest to the strongest."""

    L = 0
    M = 1
    Q = 2
    H = 3


class VersionKind(enum.Enum):
    """The family a symbol version belongs to."""

    NORMAL = "normal"
    MICRO = "micro"
    RECT_MICRO = "rect_micro"


_RMQR_VALID: dict[int, tuple[int, ...]] = {
    7: (43, 59, 77, 99, 139),
    9: (43, 59, 77, 99, 139),
    11: (27, 43, 59, 77, 99, 139),
    13: (27, 43, 59, 77, 99, 139),
    15: (43, 59, 77, 99, 139),
    17: (43, 59, 77, 99, 139),
}

_RMQR_ORDER: tuple[tuple[int, int], ...] = tuple(
    (height, width) for height, widths in _RMQR_VALID.items() for width in widths
)


@dataclass(frozen=True)
class Version:
    """A symbol version: a normal QR code, a Micro QR code or an rMQR code.

    Normal and Micro versions carry ``number``; rMQR versions carry
    ``rmqr_height`` and ``rmqr_width`` in modules.
    """

    kind: VersionKind
    number: int = 0
    rmqr_height: int = 0
    rmqr_width: int = 0

    RMQR_ALL_WIDTH: ClassVar[tuple[int, ...]] = (27, 43, 59, 77, 99, 139)
    RMQR_ALL_HEIGHT: ClassVar[tuple[int, ...]] = (7, 9, 11, 13, 15, 17)

    def __post_init__(self) -> None:
        if self.kind is VersionKind.NORMAL:
            if not 1 <= self.number <= 40:
                raise InvalidVersion(f"QR code version {self.number} is out of range 1-40")
        elif self.kind is VersionKind.MICRO:
            if not 1 <= self.number <= 4:
                raise InvalidVersion(f"Micro QR code version {self.number} is out of range 1-4")
        elif self.rmqr_width not in _RMQR_VALID.get(self.rmqr_height, ()):
            raise InvalidVersion(
                f"R{self.rmqr_height}x{self.rmqr_width} is not a valid rMQR code version"
            )

    @classmethod
    def normal(cls, number: int) -> Version:
        """A normal QR code version, 1 to 40."""
        return cls(VersionKind.NORMAL, number=number)

    @classmethod
    def micro(cls, number: int) -> Version:
        """A Micro QR code version, M1 to M4."""
        return cls(VersionKind.MICRO, number=number)

    @classmethod
    def rect_micro(cls, height: int, width: int) -> Version:
        """An rMQR code version given by its height and width in modules."""
        return cls(VersionKind.RECT_MICRO, rmqr_height=height, rmqr_width=width)

    def width(self) -> int:
        """Number of modules on a horizontal side."""
        if self.kind is VersionKind.NORMAL:
            return self.number * 4 + 17
        if self.kind is VersionKind.MICRO:
            return self.number * 2 + 9
        return self.rmqr_width

    def height(self) -> int:
        """Number of modules on a vertical side."""
        if self.kind is VersionKind.RECT_MICRO:
            return self.rmqr_height
        return self.width()

    def is_normal(self) -> bool:
        return self.kind is VersionKind.NORMAL

    def is_micro(self) -> bool:
        return self.kind is VersionKind.MICRO

    def is_rect_micro(self) -> bool:
        return self.kind is VersionKind.RECT_MICRO

    def rect_micro_index(self) -> int:
        """Position of this rMQR version in the standard R7x43 … R17x139 order."""
        if not self.is_rect_micro():
            raise InvalidVersion(f"{self!r} is not an rMQR code version")
        return _RMQR_ORDER.index((self.rmqr_height, self.rmqr_width))

    def rect_micro_width_index(self) -> int:
        """Position of this rMQR version's width among all rMQR widths."""
        if not self.is_rect_micro():
            raise InvalidVersion(f"{self!r} is not an rMQR code version")
        return self.RMQR_ALL_WIDTH.index(self.rmqr_width)

    def __repr__(self) -> str:
        if self.kind is VersionKind.NORMAL:
            return f"Version.normal({self.number})"
        if self.kind is VersionKind.MICRO:
            return f"Version.micro({self.number})"
        return f"Version.rect_micro({self.rmqr_height}, {self.rmqr_width})"