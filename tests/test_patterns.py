import pytest

from qrforge.patterns import alignment_positions, data_module_coords, is_functional
from qrforge.types import QrError, Version


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        (Version.normal(1), ()),
        (Version.micro(3), ()),
        (Version.normal(3), (22,)),
        (Version.normal(7), (6, 22, 38)),
        (Version.normal(40), (6, 30, 58, 86, 114, 142, 170)),
        (Version.rect_micro(11, 27), ()),
        (Version.rect_micro(7, 43), (21,)),
        (Version.rect_micro(7, 77), (25, 51)),
        (Version.rect_micro(17, 139), (27, 55, 83, 111)),
    ],
)
def test_alignment_positions(version, expected):
    assert alignment_positions(version) == expected


def test_is_functional_qr_1():
    version = Version.normal(1)
    w = version.width()
    assert is_functional(version, w, 0, 0)
    assert is_functional(version, w, 10, 6)
    assert not is_functional(version, w, 10, 5)
    assert not is_functional(version, w, 14, 14)
    assert is_functional(version, w, 6, 11)
    assert not is_functional(version, w, 4, 11)
    assert is_functional(version, w, 4, 13)
    assert is_functional(version, w, 17, 7)
    assert not is_functional(version, w, 17, 17)


def test_is_functional_qr_3():
    version = Version.normal(3)
    w = version.width()
    assert is_functional(version, w, 0, 0)
    assert not is_functional(version, w, 25, 24)
    assert is_functional(version, w, 24, 24)
    assert not is_functional(version, w, 9, 25)
    assert not is_functional(version, w, 20, 0)
    assert is_functional(version, w, 21, 0)


def test_is_functional_qr_7():
    version = Version.normal(7)
    w = version.width()
    assert is_functional(version, w, 21, 4)
    assert is_functional(version, w, 7, 21)
    assert is_functional(version, w, 22, 22)
    assert is_functional(version, w, 8, 8)
    assert not is_functional(version, w, 19, 5)
    assert not is_functional(version, w, 36, 3)
    assert not is_functional(version, w, 4, 36)
    assert is_functional(version, w, 38, 38)


def test_is_functional_micro():
    version = Version.micro(1)
    w = version.width()
    assert is_functional(version, w, 8, 0)
    assert is_functional(version, w, 10, 0)
    assert not is_functional(version, w, 10, 1)
    assert is_functional(version, w, 8, 8)
    assert is_functional(version, w, 0, 9)
    assert not is_functional(version, w, 1, 9)


def test_is_functional_negative_coordinates_wrap():
    version = Version.normal(1)
    w = version.width()
    assert is_functional(version, w, -1, 0) == is_functional(version, w, 20, 0)
    assert is_functional(version, w, -4, -4) == is_functional(version, w, 17, 17)
    assert not is_functional(version, w, -4, -4)


def test_is_functional_rejects_rmqr():
    version = Version.rect_micro(7, 43)
    with pytest.raises(QrError):
        is_functional(version, version.width(), 0, 0)


def test_is_functional_rejects_wrong_width():
    with pytest.raises(ValueError):
        is_functional(Version.normal(1), 25, 0, 0)


MICRO_1_COORDS = [
    (10, 10), (9, 10), (10, 9), (9, 9), (10, 8), (9, 8), (10, 7), (9, 7),
    (10, 6), (9, 6), (10, 5), (9, 5), (10, 4), (9, 4), (10, 3), (9, 3),
    (10, 2), (9, 2), (10, 1), (9, 1), (10, 0), (9, 0),
    (8, 0), (7, 0), (8, 1), (7, 1), (8, 2), (7, 2), (8, 3), (7, 3),
    (8, 4), (7, 4), (8, 5), (7, 5), (8, 6), (7, 6), (8, 7), (7, 7),
    (8, 8), (7, 8), (8, 9), (7, 9), (8, 10), (7, 10),
    (6, 10), (5, 10), (6, 9), (5, 9), (6, 8), (5, 8), (6, 7), (5, 7),
    (6, 6), (5, 6), (6, 5), (5, 5), (6, 4), (5, 4), (6, 3), (5, 3),
    (6, 2), (5, 2), (6, 1), (5, 1), (6, 0), (5, 0),
    (4, 0), (3, 0), (4, 1), (3, 1), (4, 2), (3, 2), (4, 3), (3, 3),
    (4, 4), (3, 4), (4, 5), (3, 5), (4, 6), (3, 6), (4, 7), (3, 7),
    (4, 8), (3, 8), (4, 9), (3, 9), (4, 10), (3, 10),
    (2, 10), (1, 10), (2, 9), (1, 9), (2, 8), (1, 8), (2, 7), (1, 7),
    (2, 6), (1, 6), (2, 5), (1, 5), (2, 4), (1, 4), (2, 3), (1, 3),
    (2, 2), (1, 2), (2, 1), (1, 1), (2, 0), (1, 0),
]


def test_data_coords_micro_1():
    assert list(data_module_coords(Version.micro(1))) == MICRO_1_COORDS


def test_data_coords_micro_2():
    coords = list(data_module_coords(Version.micro(2)))
    assert len(coords) == 156
    assert len(set(coords)) == 156
    assert coords[:4] == [(12, 12), (11, 12), (12, 11), (11, 11)]
    assert coords[24:30] == [(12, 0), (11, 0), (10, 0), (9, 0), (10, 1), (9, 1)]
    assert coords[-4:] == [(2, 11), (1, 11), (2, 12), (1, 12)]
    assert all(x != 0 for x, _ in coords)


def test_data_coords_qr_1():
    coords = list(data_module_coords(Version.normal(1)))
    assert len(coords) == 420
    assert len(set(coords)) == 420
    assert coords[:6] == [(20, 20), (19, 20), (20, 19), (19, 19), (20, 18), (19, 18)]
    assert coords[40:46] == [(20, 0), (19, 0), (18, 0), (17, 0), (18, 1), (17, 1)]
    assert all(x != 6 for x, _ in coords)
    skip = coords.index((7, 0))
    assert coords[skip - 1 : skip + 3] == [(8, 0), (7, 0), (5, 0), (4, 0)]
    assert coords[-4:] == [(1, 19), (0, 19), (1, 20), (0, 20)]


def test_data_coords_rmqr_stays_inside_reduced_area():
    version = Version.rect_micro(7, 43)
    coords = list(data_module_coords(version))
    assert coords[0] == (41, 5)
    assert len(set(coords)) == len(coords)
    assert all(0 <= x < 42 and 0 <= y < 6 for x, y in coords)