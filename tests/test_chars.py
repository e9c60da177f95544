import io

import pytest

from consolegames import chars
from consolegames.chars import LetterKind, Outcome


@pytest.mark.parametrize(
    "ch,kind",
    [("A", LetterKind.UPPER), ("Z", LetterKind.UPPER), ("a", LetterKind.LOWER),
     ("z", LetterKind.LOWER), ("1", LetterKind.OTHER), ("@", LetterKind.OTHER),
     ("[", LetterKind.OTHER), ("{", LetterKind.OTHER)],
)
def test_classify_letter(ch, kind):
    assert chars.classify_letter(ch) is kind


def test_classify_letter_rejects_strings():
    with pytest.raises(ValueError):
        chars.classify_letter("AB")
    with pytest.raises(ValueError):
        chars.is_special_char("")


@pytest.mark.parametrize("ch", list("!/:@[`{~#"))
def test_special_chars(ch):
    assert chars.is_special_char(ch) is True


@pytest.mark.parametrize("ch", list("aZ09 "))
def test_not_special_chars(ch):
    assert chars.is_special_char(ch) is False


def test_alternate_case_pinned():
    assert chars.alternate_case("hello") == "HeLlO"


@pytest.mark.parametrize("text", ["hello", "WORLD", "MiXeD", "ab-cd", "a!!b", "x1y2z3"])
def test_alternate_case_preserves_letters(text):
    out = chars.alternate_case(text)
    assert out.lower() == text.lower()
    assert len(out) == len(text)


def test_alternate_case_letter_pattern_without_specials():
    out = chars.alternate_case("abcdefgh")
    assert all(c.isupper() for c in out[::2])
    assert all(c.islower() for c in out[1::2])


def test_alternate_case_special_keeps_alternation():
    out = chars.alternate_case("ab-cd")
    letters = [c for c in out if c.isalpha()]
    for first, second in zip(letters, letters[1:]):
        assert first.isupper() != second.isupper()


def test_rock_paper_scissors():
    assert chars.rock_paper_scissors(3) is Outcome.WIN
    assert chars.rock_paper_scissors(2) is Outcome.DRAW
    assert chars.rock_paper_scissors(1) is Outcome.LOSE
    assert chars.rock_paper_scissors(3).value == "승리!"


def test_hand_for_key():
    assert chars.hand_for_key("a") == "가위"
    assert chars.hand_for_key("b") == "바위"
    assert chars.hand_for_key("c") == "보"
    assert chars.hand_for_key("x") is None


@pytest.mark.parametrize("n", [-4, -1, 0, 1, 2, 7, 10])
def test_is_even_alternates(n):
    assert chars.is_even(n) != chars.is_even(n + 1)
    assert chars.is_even(2 * n) is True


def test_main_parity(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n7\n0\n"))
    assert chars.main(["parity"]) == 0
    out = capsys.readouterr().out
    assert "입력하신 숫자는 4, 짝수입니다." in out
    assert "입력하신 숫자는 7, 홀수입니다." in out
    assert "프로그램을 종료합니다." in out


def test_main_hand_unknown(capsys):
    chars.main(["hand", "q"])
    out = capsys.readouterr().out
    assert "처리되지 않은 예외 입력입니다." in out


def test_main_charcheck(capsys):
    chars.main(["charcheck", "!"])
    out = capsys.readouterr().out
    assert "! 는 영문자가 아닙니다." in out
    assert "! 는 특수문자입니다." in out


def test_main_altcase_reverses(capsys):
    chars.main(["altcase", "hello"])
    out = capsys.readouterr().out
    assert "대소문자 변경 후 HeLlO" in out
    assert "OlLeH" in out