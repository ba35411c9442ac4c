import pytest

from core.origin import Destination as D, Origin
from mapper import ButtonMap, decouple_axes, lookup


def test_encode_renders_sorted_entries():
    pairs = [
        (D.B, Origin.button(1)),
        (D.A, Origin.button(0)),
        (D.LEFT_TRIGGER, Origin.axis(4, reversed=True)),
    ]
    assert ButtonMap.encode(pairs) == "a:b0,b:b1,lefttrigger:-a4"


def test_encode_is_order_independent():
    pairs = [(D.X, Origin.button(2)), (D.Y, Origin.button(3)), (D.HOME, Origin.button(16))]
    assert ButtonMap.encode(pairs) == ButtonMap.encode(list(reversed(pairs)))


def test_encode_last_write_wins():
    pairs = [(D.A, Origin.button(0)), (D.A, Origin.button(5))]
    assert ButtonMap.encode(pairs) == "a:b5"


def test_decoupling_drops_negative_half_on_shared_axis():
    pairs = [
        (D.LEFT_UP, Origin.axis(1, reversed=True)),
        (D.LEFT_DOWN, Origin.axis(1)),
    ]
    text = ButtonMap.encode(pairs)
    assert text == "leftdown:a1"
    bm = ButtonMap(text)
    assert D.LEFT_UP not in bm
    assert bm[D.LEFT_DOWN] == Origin.axis(1)


def test_decoupling_keeps_distinct_axes_and_buttons():
    grouped = {
        D.LEFT_LEFT: Origin.axis(0, reversed=True),
        D.LEFT_RIGHT: Origin.axis(5),
        D.RIGHT_LEFT: Origin.button(3),
        D.RIGHT_RIGHT: Origin.button(3),
    }
    assert decouple_axes(grouped) == grouped


def test_round_trip_for_every_surviving_destination():
    pairs = [(d, Origin.button(i)) for i, d in enumerate(D)]
    pairs[11] = (D.LEFT_LEFT, Origin.axis(0, reversed=True))
    pairs[12] = (D.LEFT_RIGHT, Origin.axis(0))
    bm = ButtonMap.from_pairs(pairs)
    for dest, origin in pairs:
        if dest is D.LEFT_LEFT:
            assert bm.get(dest) is None
        else:
            assert bm.get(dest) == origin


def test_parse_drops_bad_segments():
    bm = ButtonMap("a:b0,bogus:b1,b:z9,nocolon,,x:-a2")
    assert bm.dropped == 3
    assert dict(bm.items()) == {D.A: Origin.button(0), D.X: Origin.axis(2, reversed=True)}


def test_parse_first_segment_wins_and_text_preserved():
    bm = ButtonMap("b:b1,a:b0,a:b7")
    assert bm[D.A] == Origin.button(0)
    assert str(bm) == "b:b1,a:b0,a:b7"


def test_empty_map():
    bm = ButtonMap("")
    assert len(bm) == 0
    assert bm.get(D.A) is None
    assert ButtonMap.encode([]) == ""


def test_lookup_matches_whole_destination_name():
    text = "leftright:a0,right:b15"
    assert lookup(text, D.RIGHT) == Origin.button(15)
    assert lookup(text, D.LEFT_RIGHT) == Origin.axis(0)
    assert lookup(text, D.LEFT) is None


def test_equality_compares_relation():
    assert ButtonMap("a:b0,b:b1") == ButtonMap("b:b1,a:b0")
    assert ButtonMap("a:b0") != ButtonMap("a:b1")
