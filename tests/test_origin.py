import pytest

from core.origin import AXIS_PAIRS, Destination, Origin, OriginType, destination_to_string


def test_destination_strings_are_unique_and_lowercase():
    names = [destination_to_string(d) for d in Destination]
    assert len(names) == len(set(names))
    assert all(n == n.lower() for n in names)
    assert destination_to_string(Destination.LEFT_TRIGGER) == "lefttrigger"
    assert destination_to_string(Destination.HOME) == "home"


def test_destination_parse_inverts_to_string():
    for d in Destination:
        assert Destination.parse(destination_to_string(d)) is d
    with pytest.raises(ValueError):
        Destination.parse("select")


def test_origin_render_and_parse():
    assert str(Origin.axis(3, reversed=True)) == "-a3"
    assert str(Origin.button(12)) == "b12"
    assert Origin.parse("-a3") == Origin(OriginType.AXIS, 3, True)
    assert Origin.parse("b12") == Origin.button(12)


@pytest.mark.parametrize("text", ["", "c1", "a", "+a1", "a-1", "b1.5", "--a1"])
def test_origin_parse_rejects_garbage(text):
    with pytest.raises(ValueError):
        Origin.parse(text)


def test_origin_negative_index_rejected():
    with pytest.raises(ValueError):
        Origin.axis(-1)


def test_axis_pairs_cover_both_sticks():
    flat = [d for pair in AXIS_PAIRS for d in pair]
    assert len(flat) == 8
    assert (Destination.LEFT_UP, Destination.LEFT_DOWN) in AXIS_PAIRS
