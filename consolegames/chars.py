"""Character checks, case alternation and tiny choice games."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Sequence


class LetterKind(enum.Enum):
    UPPER = "대문자"
    LOWER = "소문자"
    OTHER = "영문자가 아님"


class Outcome(enum.Enum):
    WIN = "승리!"
    DRAW = "비겼습니다."
    LOSE = "패배!"


_HANDS = {"a": "가위", "b": "바위", "c": "보"}
_SPECIAL_RANGES = (("!", "/"), (":", "@"), ("[", "`"), ("{", "~"))


def _single(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def classify_letter(ch: str) -> LetterKind:
    """Tell whether ``ch`` is an ASCII upper-case or lower-case letter."""
    _single(ch)
    if _is_upper(ch):
        return LetterKind.UPPER
    if _is_lower(ch):
        return LetterKind.LOWER
    return LetterKind.OTHER


def is_special_char(ch: str) -> bool:
    """Tell whether ``ch`` is printable ASCII punctuation."""
    _single(ch)
    return any(low <= ch <= high for low, high in _SPECIAL_RANGES)


def alternate_case(text: str) -> str:
    """Alternate letters upper, lower, upper, ...; a non-letter shifts the pattern."""
    shift = 0
    result = []
    for index, ch in enumerate(text):
        if _is_lower(ch):
            if (index + shift) % 2 == 0:
                ch = ch.upper()
        elif _is_upper(ch):
            if (index + shift) % 2 != 0:
                ch = ch.lower()
        else:
            shift += 1
        result.append(ch)
    return "".join(result)


def rock_paper_scissors(player_number: int) -> Outcome:
    """Play 1 (scissors), 2 (rock) or 3 (paper) against a computer holding rock."""
    if player_number == 3:
        return Outcome.WIN
    if player_number == 2:
        return Outcome.DRAW
    return Outcome.LOSE


def hand_for_key(key: str) -> str | None:
    """Return the hand named by key ``a``, ``b`` or ``c``, or None for any other key."""
    return _HANDS.get(key)


def is_even(number: int) -> bool:
    return number % 2 == 0


def _read_int(prompt: str) -> int | None:
    """Read an integer, skipping lines that are not one; None at end of input."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return None
        try:
            return int(line.split()[0])
        except (IndexError, ValueError):
            continue


def _char_check(ch: str | None) -> None:
    if ch is None:
        ch = input("문자 하나를 입력하세요 : ")[:1] or " "
    print(f"\n입력하신 문자는 : {ch}", end="")
    kind = classify_letter(ch)
    if kind is LetterKind.UPPER:
        print(f"\n{ch} 는 대문자입니다.")
    elif kind is LetterKind.LOWER:
        print(f"\n{ch} 는 소문자입니다.")
    else:
        print(f"\n{ch} 는 영문자가 아닙니다.")
    if is_special_char(ch):
        print(f"\n{ch} 는 특수문자입니다.")
    else:
        print(f"\n{ch} 는 특수문자가 아닙니다.")


def _rps(number: int | None) -> None:
    if number is None:
        number = _read_int("가위바위보 게임.\n1, 2, 3 중에 하나를 입력하세요 : ")
        if number is None:
            return
    print(rock_paper_scissors(number).value)


def _parity() -> None:
    while True:
        number = _read_int("짝수, 홀수 판별기 입니다.\n숫자를 입력해주세요. 종료는 0 : ")
        if number is None or number == 0:
            print("프로그램을 종료합니다.")
            return
        kind = "짝수" if is_even(number) else "홀수"
        print(f"입력하신 숫자는 {number}, {kind}입니다.")
        print()


def _hand(key: str | None) -> None:
    if key is None:
        key = input("User Input : ")[:1]
    print(key)
    print()
    hand = hand_for_key(key)
    if hand is None:
        print("처리되지 않은 예외 입력입니다. ")
    else:
        print(f"이것은 {hand} ")


def _altcase(word: str | None) -> None:
    if word is None:
        tokens = input("영어문자열을 입력하시오 : ").split()
        word = tokens[0] if tokens else ""
    word = word[:99]
    changed = alternate_case(word)
    print(f"\n대소문자 변경 후 {changed}")
    print(f"\n문자의 순서를 반대로 출력해보기{changed[::-1]}")
    print()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="consolegames-chars")
    sub = parser.add_subparsers(dest="program", required=True)
    check = sub.add_parser("charcheck")
    check.add_argument("char", nargs="?")
    rps = sub.add_parser("rps")
    rps.add_argument("number", nargs="?", type=int)
    sub.add_parser("parity")
    hand = sub.add_parser("hand")
    hand.add_argument("key", nargs="?")
    alt = sub.add_parser("altcase")
    alt.add_argument("word", nargs="?")
    args = parser.parse_args(argv)

    match args.program:
        case "charcheck":
            _char_check(args.char[:1] if args.char else None)
        case "rps":
            _rps(args.number)
        case "parity":
            _parity()
        case "hand":
            _hand(args.key[:1] if args.key else None)
        case "altcase":
            _altcase(args.word)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())