import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("navy", 0x80),
    ],
)
def test_known_names(name, value):
    assert lookup_color(name) == value


def test_none_means_transparent():
    assert lookup_color("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW", "Ghost White"])
def test_lookup_ignores_case(name):
    assert lookup_color(name) == lookup_color(name.lower())


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_spelling_with_space_matches_joined_spelling():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("alice blue") == lookup_color("aliceblue")


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_ramp_is_increasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize("name", ["", "notacolour", "gray101", "snow5"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        lookup_color(name)