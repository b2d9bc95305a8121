import pytest

from tvibe.errors import MalformedColor, MissingBaseColor, RampNotPrepared
from tvibe.ramp import BackgroundRamp, ForegroundRamp, RampState, SelectionRamp


def test_empty_ramps_use_defaults():
    bg = BackgroundRamp()
    assert bg.state is RampState.EMPTY
    bg.prepare()
    assert bg.colors == ("#000000", "#000000", "#0f0f0f", "#1f1f1f", "#3b3b3b")

    fg = ForegroundRamp()
    fg.prepare()
    assert fg.colors == ("#ffffff", "#ffffff", "#c4c4c4", "#8a8a8a")

    sel = SelectionRamp()
    sel.prepare()
    assert sel.colors == ("#2a2a2a", "#535353")


def test_single_color_fills_around_anchor():
    bg = BackgroundRamp("#333333")
    assert bg.state is RampState.SINGLE
    bg.prepare()
    assert bg.state is RampState.FILLED
    assert bg.colors == ("#292929", "#333333", "#424242", "#525252", "#6e6e6e")


def test_single_color_is_normalized():
    bg = BackgroundRamp("#AABBCC")
    bg.prepare()
    assert bg[1] == "#aabbcc"


def test_partial_ramp_derives_anchor_from_later_slot():
    bg = BackgroundRamp(["", "", "", "#666666", ""])
    bg.prepare((-4, 6, 20, 40))
    assert bg.colors == ("#292929", "#333333", "#424242", "#666666", "#999999")


def test_partial_ramp_derives_anchor_from_slot_zero():
    bg = BackgroundRamp(["#292929", None, None, None, None])
    bg.prepare()
    assert bg.colors == ("#292929", "#333333", "#424242", "#525252", "#6e6e6e")


def test_partial_selection_derives_first_slot():
    sel = SelectionRamp([None, "#535353"])
    sel.prepare()
    assert sel.colors == ("#2a2a2a", "#535353")


def test_supplied_slots_are_kept():
    fg = ForegroundRamp(["#010203", "#ebdbb2", "", "#bdae93"])
    fg.prepare()
    assert fg[0] == "#010203"
    assert fg[1] == "#ebdbb2"
    assert fg[3] == "#bdae93"
    assert fg[2]


def test_prepare_is_idempotent():
    bg = BackgroundRamp("#282828")
    bg.prepare()
    first = bg.colors
    bg.prepare()
    assert bg.colors == first


def test_selection_accepts_scalar_offset():
    sel = SelectionRamp("#2a2a2a")
    sel.prepare(16)
    assert sel[1] == "#535353"


def test_all_empty_slots_raise_missing_base():
    bg = BackgroundRamp(["", "", "", "", ""])
    with pytest.raises(MissingBaseColor) as exc_info:
        bg.prepare()
    assert "Background" in str(exc_info.value)
    assert bg.to_data() == ["", "", "", "", ""]


def test_malformed_single_leaves_ramp_untouched():
    bg = BackgroundRamp("#12345")
    with pytest.raises(MalformedColor):
        bg.prepare()
    assert bg.state is RampState.SINGLE
    assert bg.to_data() == "#12345"


def test_reading_before_prepare_raises():
    bg = BackgroundRamp("#333333")
    with pytest.raises(RampNotPrepared):
        bg[0]
    with pytest.raises(RampNotPrepared):
        bg.colors

    partial = ForegroundRamp(["", "#ffffff", "", ""])
    assert not partial.is_prepared
    with pytest.raises(RampNotPrepared):
        partial[1]


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        BackgroundRamp(["#000000"] * 4)
    with pytest.raises(ValueError):
        BackgroundRamp("#000000").prepare((1, 2, 3))


def test_validate_names_slot():
    bg = BackgroundRamp(["#000000", "#12345", "", "", ""])
    with pytest.raises(MalformedColor) as exc_info:
        bg.validate()
    assert exc_info.value.field == "background[1]"


def test_len_and_equality():
    assert len(BackgroundRamp()) == 5
    assert len(ForegroundRamp()) == 4
    assert len(SelectionRamp()) == 2
    assert BackgroundRamp("#000000") == BackgroundRamp("#000000")
    assert BackgroundRamp("#000000") != ForegroundRamp("#000000")
