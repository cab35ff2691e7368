import pytest

from qrforge.types import (
    Color,
    EcLevel,
    InvalidVersion,
    QrError,
    Version,
    VersionKind,
)


def test_color_invert():
    assert Color.DARK.__invert__() is Color.LIGHT
    assert Color.LIGHT.__invert__() is Color.DARK
    assert Color.DARK.__invert__().__invert__() is Color.DARK
    assert ~Color.DARK is Color.LIGHT


def test_ec_level_order():
    assert [EcLevel(i) for i in range(4)] == [EcLevel.L, EcLevel.M, EcLevel.Q, EcLevel.H]
    assert EcLevel(0) < EcLevel(1) < EcLevel(2) < EcLevel(3)


def test_normal_dimensions():
    v = Version.normal(1)
    assert v.width() == 21
    assert v.height() == 21
    assert v.is_normal() and not v.is_micro() and not v.is_rect_micro()


def test_normal_widths_grow_by_four():
    widths = [Version.normal(n).width() for n in range(1, 41)]
    assert all(b - a == 4 for a, b in zip(widths, widths[1:]))
    assert all(Version.normal(n).height() == Version.normal(n).width() for n in range(1, 41))


def test_micro_dimensions():
    assert Version.micro(1).width() == 11
    assert Version.micro(2).width() == 13
    assert Version.micro(2).height() == 13
    assert Version.micro(3).is_micro()


def test_rect_micro_dimensions():
    v = Version.rect_micro(7, 43)
    assert v.width() == 43
    assert v.height() == 7
    assert v.is_rect_micro()
    assert v.kind is VersionKind.RECT_MICRO


def test_rect_micro_index_bounds():
    assert Version.rect_micro(7, 43).rect_micro_index() == 0
    indices = [
        Version.rect_micro(h, w).rect_micro_index()
        for h in Version.RMQR_ALL_HEIGHT
        for w in Version.RMQR_ALL_WIDTH
        if not (h in (7, 9, 15, 17) and w == 27)
    ]
    assert indices == list(range(len(indices)))
    assert Version.rect_micro(17, 139).rect_micro_index() == len(indices) - 1


def test_rect_micro_width_index():
    for expected, width in enumerate(Version.RMQR_ALL_WIDTH):
        assert Version.rect_micro(11, width).rect_micro_width_index() == expected


@pytest.mark.parametrize(
    "factory",
    [
        lambda: Version.normal(0),
        lambda: Version.normal(41),
        lambda: Version.micro(0),
        lambda: Version.micro(5),
        lambda: Version.rect_micro(7, 27),
        lambda: Version.rect_micro(8, 43),
        lambda: Version.rect_micro(17, 100),
    ],
)
def test_invalid_versions(factory):
    with pytest.raises(InvalidVersion):
        factory()


def test_rect_micro_index_rejects_other_kinds():
    with pytest.raises(QrError):
        Version.normal(1).rect_micro_index()
    with pytest.raises(InvalidVersion):
        Version.micro(2).rect_micro_width_index()


def test_versions_compare_by_value():
    assert Version.normal(3) == Version(VersionKind.NORMAL, number=3)
    assert Version.micro(3) != Version.normal(3)
    assert len({Version.rect_micro(9, 59), Version.rect_micro(9, 59)}) == 1
    assert repr(Version.rect_micro(9, 59)) == "Version.rect_micro(9, 59)"