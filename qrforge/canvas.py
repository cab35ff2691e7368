"""The canvas on which a symbol's patterns and data modules are laid out."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from qrforge.masking import MaskPattern, format_info_number, mask_function
from qrforge.patterns import alignment_positions, data_module_coords
from qrforge.types import Color, EcLevel, Version


@dataclass(frozen=True)
class Module:
    """One module of the canvas.

    ``fill`` is ``None`` for an empty module. ``is_masked`` is true for
    functional modules and for data modules the mask has been applied to.
    """

    fill: Color | None = None
    is_masked: bool = False

    @classmethod
    def empty(cls) -> Module:
        return cls()

    @classmethod
    def masked(cls, color: Color) -> Module:
        return cls(color, True)

    @classmethod
    def unmasked(cls, color: Color) -> Module:
        return cls(color, False)

    @property
    def is_empty(self) -> bool:
        return self.fill is None

    def color(self) -> Color:
        """The color the module shows; empty modules are light."""
        return Color.LIGHT if self.fill is None else self.fill

    def is_dark(self) -> bool:
        return self.color() is Color.DARK

    def mask(self, should_invert: bool) -> Module:
        """Apply the mask to an unmasked or empty module."""
        if self.fill is None:
            return Module.masked(Color.DARK if should_invert else Color.LIGHT)
        if self.is_masked:
            return self
        return Module.masked(~self.fill if should_invert else self.fill)


EMPTY = Module()

_VERSION_INFO_COORDS_BL: tuple[tuple[int, int], ...] = tuple(
    (x, y) for x in range(5, -1, -1) for y in (-9, -10, -11)
)

_VERSION_INFO_COORDS_TR: tuple[tuple[int, int], ...] = tuple(
    (x, y) for y in range(5, -1, -1) for x in (-9, -10, -11)
)

_FORMAT_INFO_COORDS_QR_MAIN: tuple[tuple[int, int], ...] = (
    (0, 8), (1, 8), (2, 8), (3, 8), (4, 8), (5, 8), (7, 8), (8, 8),
    (8, 7), (8, 5), (8, 4), (8, 3), (8, 2), (8, 1), (8, 0),
)

_FORMAT_INFO_COORDS_QR_SIDE: tuple[tuple[int, int], ...] = (
    (8, -1), (8, -2), (8, -3), (8, -4), (8, -5), (8, -6), (8, -7),
    (-8, 8), (-7, 8), (-6, 8), (-5, 8), (-4, 8), (-3, 8), (-2, 8), (-1, 8),
)

_FORMAT_INFO_COORDS_MICRO_QR: tuple[tuple[int, int], ...] = (
    (1, 8), (2, 8), (3, 8), (4, 8), (5, 8), (6, 8), (7, 8), (8, 8),
    (8, 7), (8, 6), (8, 5), (8, 4), (8, 3), (8, 2), (8, 1),
)

_VERSION_INFOS: tuple[int, ...] = (
    0x07C94, 0x085BC, 0x09A99, 0x0A4D3, 0x0BBF6, 0x0C762, 0x0D847, 0x0E60D,
    0x0F928, 0x10B78, 0x1145D, 0x12A17, 0x13532, 0x149A6, 0x15683, 0x168C9,
    0x177EC, 0x18EC4, 0x191E1, 0x1AFAB, 0x1B08E, 0x1CC1A, 0x1D33F, 0x1ED75,
    0x1F250, 0x209D5, 0x216F0, 0x228BA, 0x2379F, 0x24B0B, 0x2542E, 0x26A64,
    0x27541, 0x28C69,
)

_RMQR_VERSION_INFO_COORDS_L: tuple[tuple[int, int], ...] = (
    (11, 3), (11, 2), (11, 1),
    (10, 5), (10, 4), (10, 3), (10, 2), (10, 1),
    (9, 5), (9, 4), (9, 3), (9, 2), (9, 1),
    (8, 5), (8, 4), (8, 3), (8, 2), (8, 1),
)

_RMQR_VERSION_INFO_COORDS_R: tuple[tuple[int, int], ...] = (
    (-3, -6), (-4, -6), (-5, -6),
    (-6, -2), (-6, -3), (-6, -4), (-6, -5), (-6, -6),
    (-7, -2), (-7, -3), (-7, -4), (-7, -5), (-7, -6),
    (-8, -2), (-8, -3), (-8, -4), (-8, -5), (-8, -6),
)

# Version information beside the finder pattern, for levels (M, H), in the
# order R7x43 ... R17x139.
_RMQR_VERSION_INFOS_L: tuple[tuple[int, int], ...] = (
    (0x1FAB2, 0x3F367), (0x1E597, 0x3EC42), (0x1DBDD, 0x3D208), (0x1C4F8, 0x3CD2D),
    (0x1B86C, 0x3B1B9), (0x1A749, 0x3AE9C), (0x19903, 0x390D6), (0x18626, 0x38FF3),
    (0x17F0E, 0x376DB), (0x1602B, 0x369FE), (0x15E61, 0x357B4), (0x14144, 0x34891),
    (0x13DD0, 0x33405), (0x122F5, 0x32B20), (0x11CBF, 0x3156A), (0x1039A, 0x30A4F),
    (0x0F1CA, 0x2F81F), (0x0EEEF, 0x2E73A), (0x0D0A5, 0x2D970), (0x0CF80, 0x2C655),
    (0x0B314, 0x2BAC1), (0x0AC31, 0x2A5E4), (0x0927B, 0x29BAE), (0x08D5E, 0x2848B),
    (0x07476, 0x27DA3), (0x06B53, 0x26286), (0x05519, 0x25CCC), (0x04A3C, 0x243E9),
    (0x036A8, 0x23F7D), (0x0298D, 0x22058), (0x017C7, 0x21E12), (0x008E2, 0x20137),
)

# Version information beside the finder sub-pattern, for levels (M, H).
_RMQR_VERSION_INFOS_R: tuple[tuple[int, int], ...] = (
    (0x20A7B, 0x003AE), (0x2155E, 0x01C8B), (0x22B14, 0x022C1), (0x23431, 0x03DE4),
    (0x248A5, 0x04170), (0x25780, 0x05E55), (0x269CA, 0x0601F), (0x276EF, 0x07F3A),
    (0x28FC7, 0x08612), (0x290E2, 0x09937), (0x2AEA8, 0x0A77D), (0x2B18D, 0x0B858),
    (0x2CD19, 0x0C4CC), (0x2D23C, 0x0DBE9), (0x2EC76, 0x0E5A3), (0x2F353, 0x0FA86),
    (0x30103, 0x108D6), (0x31E26, 0x117F3), (0x3206C, 0x129B9), (0x33F49, 0x1369C),
    (0x343DD, 0x14A08), (0x35CF8, 0x1552D), (0x362B2, 0x16B67), (0x37D97, 0x17442),
    (0x384BF, 0x18D6A), (0x39B9A, 0x1924F), (0x3A5D0, 0x1AC05), (0x3BAF5, 0x1B320),
    (0x3C661, 0x1CFB4), (0x3D944, 0x1D091), (0x3E70E, 0x1EEDB), (0x3F82B, 0x1F1FE),
)


class Canvas:
    """An intermediate grid used to render error-corrected data into a symbol.

    Modules are stored row by row, left to right. Negative coordinates wrap
    around from the right or bottom edge.
    """

    def __init__(self, version: Version, ec_level: EcLevel) -> None:
        self.version = version
        self.ec_level = EcLevel(ec_level)
        self.width = version.width()
        self.height = version.height()
        self.modules: list[Module] = [EMPTY] * (self.width * self.height)

    def copy(self) -> Canvas:
        other = Canvas(self.version, self.ec_level)
        other.modules = list(self.modules)
        return other

    def _index(self, x: int, y: int) -> int:
        if x < 0:
            x += self.width
        if y < 0:
            y += self.height
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) lies outside the {self.width}x{self.height} canvas")
        return y * self.width + x

    def get(self, x: int, y: int) -> Module:
        return self.modules[self._index(x, y)]

    def set(self, x: int, y: int, module: Module) -> None:
        self.modules[self._index(x, y)] = module

    def put(self, x: int, y: int, color: Color) -> None:
        """Set a functional module, which masking leaves alone."""
        self.set(x, y, Module.masked(color))

    def to_debug_str(self, merge_masked: bool = False) -> str:
        """A text picture: ``?`` empty, ``.``/``#`` masked, ``-``/``*`` unmasked.

        With ``merge_masked`` unmasked modules are drawn like masked ones.
        """
        light_unmasked, dark_unmasked = (".", "#") if merge_masked else ("-", "*")

        def char(module: Module) -> str:
            if module.fill is None:
                return "?"
            if module.is_masked:
                return "#" if module.fill is Color.DARK else "."
            return dark_unmasked if module.fill is Color.DARK else light_unmasked

        rows = (
            "".join(char(m) for m in self.modules[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        )
        return "".join("\n" + row for row in rows)

    # Finder patterns

    def _draw_finder_pattern_at(self, x: int, y: int) -> None:
        dx_left, dx_right = (-3, 4) if x >= 0 else (-4, 3)
        if self.height == 7:
            dy_top, dy_bottom = -3, 3
        elif y >= 0:
            dy_top, dy_bottom = -3, 4
        else:
            dy_top, dy_bottom = -4, 3
        for j in range(dy_top, dy_bottom + 1):
            for i in range(dx_left, dx_right + 1):
                ring = max(abs(i), abs(j))
                color = Color.LIGHT if ring in (4, 2) else Color.DARK
                self.put(x + i, y + j, color)

    def draw_finder_patterns(self) -> None:
        """Draw the 7x7 finder patterns (and the rMQR finder sub-pattern)."""
        self._draw_finder_pattern_at(3, 3)
        if self.version.is_normal():
            self._draw_finder_pattern_at(-4, 3)
            self._draw_finder_pattern_at(3, -4)
        elif self.version.is_rect_micro():
            self._draw_alignment_pattern_at(self.width - 3, self.height - 3)

    # Alignment patterns

    def _draw_alignment_pattern_at(self, x: int, y: int) -> None:
        if self.get(x, y) != EMPTY:
            return
        for j in range(-2, 3):
            for i in range(-2, 3):
                edge = max(abs(i), abs(j)) == 2
                color = Color.DARK if edge or (i, j) == (0, 0) else Color.LIGHT
                self.put(x + i, y + j, color)

    def _draw_alignment_pattern_rmqr_at(self, x: int, y: int) -> None:
        if self.get(x, y) != EMPTY:
            return
        for j in range(-1, 2):
            for i in range(-1, 2):
                self.put(x + i, y + j, Color.DARK)
        self.put(x, y, Color.LIGHT)

    def draw_alignment_patterns(self) -> None:
        """Draw the 5x5 alignment patterns of QR codes."""
        if self.version.is_rect_micro():
            return
        positions = alignment_positions(self.version)
        for x in positions:
            for y in positions:
                self._draw_alignment_pattern_at(x, y)

    def draw_alignment_patterns_rmqr(self) -> None:
        """Draw the 3x3 alignment patterns at the top and bottom of rMQR codes."""
        if not self.version.is_rect_micro():
            return
        for x in alignment_positions(self.version):
            self._draw_alignment_pattern_rmqr_at(x, 1)
            self._draw_alignment_pattern_rmqr_at(x, self.height - 2)

    def draw_corner_finder_pattern(self) -> None:
        """Draw the corner finder patterns of rMQR codes."""
        if not self.version.is_rect_micro():
            return
        for x in (0, 1, 2):
            self.put(x, -1, Color.DARK)
        self.put(-1, 0, Color.DARK)
        self.put(-1, 1, Color.DARK)
        self.put(-2, 0, Color.DARK)
        self.put(-2, 1, Color.LIGHT)
        if self.height >= 11:
            self.put(0, -2, Color.DARK)
            self.put(1, -2, Color.LIGHT)

    # Timing patterns

    def _draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw an alternating dark/light line; even coordinates are dark."""
        if y1 == y2:
            for x in range(x1, x2 + 1):
                self.put(x, y1, Color.DARK if x % 2 == 0 else Color.LIGHT)
        else:
            for y in range(y1, y2 + 1):
                self.put(x1, y, Color.DARK if y % 2 == 0 else Color.LIGHT)

    def _draw_rmqr_timing_lines(self) -> None:
        width, height = self.width, self.height
        self._draw_line(8, 0, width - 3, 0)
        bottom_start = 8 if height == 7 else 3
        self._draw_line(bottom_start, height - 1, width - 6, height - 1)
        if height >= 11:
            self._draw_line(0, 8, 0, height - 3)
        if height >= 9:
            self._draw_line(width - 1, 2, width - 1, height - 6)
        for x in alignment_positions(self.version):
            self._draw_line(x, 3, x, height - 4)

    def draw_timing_patterns(self) -> None:
        """Draw the alternating timing lines."""
        if self.version.is_rect_micro():
            self._draw_rmqr_timing_lines()
            return
        if self.version.is_micro():
            y, x1, x2 = 0, 8, self.width - 1
        else:
            y, x1, x2 = 6, 8, self.width - 9
        self._draw_line(x1, y, x2, y)
        self._draw_line(y, x1, y, x2)

    # Format and version information

    def draw_number(
        self,
        number: int,
        bits: int,
        on_color: Color,
        off_color: Color,
        coords: Iterable[tuple[int, int]],
    ) -> None:
        """Draw ``number`` as ``bits`` big-endian bits onto ``coords``."""
        mask = 1 << (bits - 1)
        for x, y in coords:
            self.put(x, y, on_color if number & mask else off_color)
            mask >>= 1

    def _draw_format_info_with_number(self, format_info: int) -> None:
        if self.version.is_micro():
            self.draw_number(format_info, 15, Color.DARK, Color.LIGHT, _FORMAT_INFO_COORDS_MICRO_QR)
        elif self.version.is_normal():
            self.draw_number(format_info, 15, Color.DARK, Color.LIGHT, _FORMAT_INFO_COORDS_QR_MAIN)
            self.draw_number(format_info, 15, Color.DARK, Color.LIGHT, _FORMAT_INFO_COORDS_QR_SIDE)
            self.put(8, -8, Color.DARK)

    def draw_reserved_format_info_patterns(self) -> None:
        """Reserve the format information area with light modules."""
        self._draw_format_info_with_number(0)

    def draw_format_info_patterns(self, pattern: MaskPattern) -> None:
        """Draw the format information for the error correction level and mask."""
        number = format_info_number(self.version, self.ec_level, pattern)
        if number is not None:
            self._draw_format_info_with_number(number)

    def draw_version_info_patterns(self) -> None:
        """Draw the version information blocks, where the version has them."""
        version = self.version
        if version.is_micro() or (version.is_normal() and version.number <= 6):
            return
        if version.is_normal():
            info = _VERSION_INFOS[version.number - 7]
            self.draw_number(info, 18, Color.DARK, Color.LIGHT, _VERSION_INFO_COORDS_BL)
            self.draw_number(info, 18, Color.DARK, Color.LIGHT, _VERSION_INFO_COORDS_TR)
            return
        index = version.rect_micro_index()
        level = 0 if self.ec_level is EcLevel.M else 1
        self.draw_number(
            _RMQR_VERSION_INFOS_L[index][level], 18, Color.DARK, Color.LIGHT,
            _RMQR_VERSION_INFO_COORDS_L,
        )
        self.draw_number(
            _RMQR_VERSION_INFOS_R[index][level], 18, Color.DARK, Color.LIGHT,
            _RMQR_VERSION_INFO_COORDS_R,
        )

    def draw_all_functional_patterns(self) -> None:
        """Draw every functional pattern; the format area is left light."""
        self.draw_finder_patterns()
        self.draw_alignment_patterns()
        self.draw_reserved_format_info_patterns()
        self.draw_timing_patterns()
        self.draw_corner_finder_pattern()
        self.draw_alignment_patterns_rmqr()
        self.draw_version_info_patterns()

    # Data placement

    def _draw_codewords(
        self,
        codewords: bytes,
        half_codeword_at_end: bool,
        coords: Iterator[tuple[int, int]],
    ) -> None:
        last_word = len(codewords) - 1 if half_codeword_at_end else len(codewords)
        for i, byte in enumerate(codewords):
            bits_end = 4 if i == last_word else 0
            for bit in range(7, bits_end - 1, -1):
                color = Color.DARK if byte & (1 << bit) else Color.LIGHT
                for x, y in coords:
                    if self.get(x, y) == EMPTY:
                        self.set(x, y, Module.unmasked(color))
                        break
                else:
                    return

    def draw_data(self, data: bytes, ec: bytes) -> None:
        """Place the data and error correction codewords into the empty modules."""
        version, level = self.version, self.ec_level
        half_codeword_at_end = version.is_micro() and (
            (version.number in (1, 3) and level is EcLevel.L)
            or (version.number == 3 and level is EcLevel.M)
        )
        coords = data_module_coords(version)
        self._draw_codewords(bytes(data), half_codeword_at_end, coords)
        self._draw_codewords(bytes(ec), False, coords)

    def apply_mask(self, pattern: MaskPattern) -> None:
        """Mask every module and draw the matching format information."""
        inverts = mask_function(pattern)
        for y in range(self.height):
            for x in range(self.width):
                index = y * self.width + x
                self.modules[index] = self.modules[index].mask(inverts(x, y))
        self.draw_format_info_patterns(pattern)

    def colors(self) -> list[Color]:
        """The colors of all modules, row by row."""
        return [module.color() for module in self.modules]