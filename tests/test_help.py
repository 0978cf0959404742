import pytest

from consoleview.help import Rect, popup_area


def test_negative_rect_raises():
    with pytest.raises(ValueError):
        Rect(0, 0, -1, 5)


def test_popup_centred_in_even_area():
    area = Rect(0, 0, 100, 50)
    popup = popup_area(area)
    assert popup.x - area.x == area.right - popup.right
    assert popup.y - area.y == area.bottom - popup.bottom
    assert popup.width == 60


@pytest.mark.parametrize(
    "area",
    [Rect(0, 0, 100, 50), Rect(5, 3, 80, 20), Rect(0, 0, 10, 10), Rect(2, 2, 1, 1)],
)
def test_popup_inside_area(area):
    popup = popup_area(area)
    assert area.x <= popup.x <= popup.right <= area.right
    assert area.y <= popup.y <= popup.bottom <= area.bottom


def test_popup_minimum_height():
    assert popup_area(Rect(0, 0, 80, 20)).height >= 15


def test_popup_respects_offset():
    plain = popup_area(Rect(0, 0, 80, 40))
    moved = popup_area(Rect(7, 9, 80, 40))
    assert (moved.x - plain.x, moved.y - plain.y) == (7, 9)
    assert (moved.width, moved.height) == (plain.width, plain.height)