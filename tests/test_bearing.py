from __future__ import annotations

import math

import pytest

from compas_dial.core.bearing import BearingChange, BearingModel, bearing_text
from compas_dial.utils.errors import CompasValidationError


def test_set_bearing_visible_notifies_with_plain_text():
    m = BearingModel()
    change = m.set_bearing(90, visible=True)
    assert change == BearingChange(bearing=90.0, redraw=True, notification="90.0")
    assert m.bearing == 90.0


def test_set_bearing_hidden_still_stores_and_redraws():
    m = BearingModel()
    change = m.set_bearing(12.5, visible=False)
    assert change.redraw is True
    assert change.notification is None
    assert m.bearing == 12.5


@pytest.mark.parametrize("value", [-45.0, 360.0, 725.25, -1080.0, 1e6])
def test_out_of_range_bearings_kept_verbatim(value):
    m = BearingModel()
    m.set_bearing(value, visible=True)
    assert m.bearing == value


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "norte", None])
def test_invalid_bearing_rejected_and_previous_kept(value):
    m = BearingModel(30.0)
    with pytest.raises(CompasValidationError):
        m.set_bearing(value, visible=True)
    assert m.bearing == 30.0


def test_observers_receive_changes_until_unsubscribed():
    m = BearingModel()
    seen = []
    unsubscribe = m.subscribe(seen.append)

    m.set_bearing(10, visible=True)
    m.set_bearing(20, visible=False)
    unsubscribe()
    m.set_bearing(30, visible=True)

    assert [c.bearing for c in seen] == [10.0, 20.0]
    assert [c.notification for c in seen] == ["10.0", None]


def test_accessibility_text_projection():
    m = BearingModel(-12.75)
    assert m.accessibility_text(visible=True) == "-12.75"
    assert m.accessibility_text(visible=False) is None
    assert bearing_text(0) == "0.0"
