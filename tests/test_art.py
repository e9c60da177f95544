import pytest

from consolegames.art import art, art_names

EXPECTED_NAMES = {
    "dice",
    "castle",
    "road",
    "mountain",
    "mountain_heal",
    "river",
    "game_clear",
    "game_over",
    "bat",
    "bear",
    "slime",
}


def test_art_names_lists_every_picture():
    assert set(art_names()) == EXPECTED_NAMES
    assert len(art_names()) == len(EXPECTED_NAMES)


@pytest.mark.parametrize("name", sorted(EXPECTED_NAMES))
def test_every_picture_is_multiline_text(name):
    text = art(name)
    assert text.count("\n") >= 3
    assert text.strip()


def test_every_picture_is_different():
    pictures = {art(name) for name in art_names()}
    assert len(pictures) == len(EXPECTED_NAMES)


def test_unknown_picture_raises_key_error():
    with pytest.raises(KeyError):
        art("dragon")


def test_castle_ends_with_title():
    assert art("castle").endswith("Back  To  Home.\n\n")
    assert art("castle").startswith("\n\n")


def test_game_over_shows_tombstone():
    assert "|R.I.P|" in art("game_over")


def test_game_clear_starts_with_arrival_message():
    assert art("game_clear").startswith("\n\n집에 도착했다...!")


def test_road_and_river_carry_their_captions():
    assert "집에 돌아가자..." in art("road")
    assert "여긴 어디 나는 누구..." in art("river")
    assert art("river").endswith("\n\n")


def test_bear_face_line():
    assert " (O)│ ‾o‾ │(O)" in art("bear").splitlines()


def test_slime_base_line():
    assert art("slime").splitlines()[-1] == "─┴────┴─"


def test_no_trailing_whitespace_on_lines():
    for name in art_names():
        for line in art(name).splitlines():
            assert line == line.rstrip()


def test_mountain_heal_has_no_stray_quotes():
    assert '"' not in art("mountain_heal")