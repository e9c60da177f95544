"""Dice, shuffles, lotto draws, cards and critical hits."""

from __future__ import annotations

import argparse
import os
import random
import subprocess
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from consolegames.basics import CRITICAL_RATE, critical_damage

T = TypeVar("T")

LOTTO_MAX = 45
LOTTO_COUNT = 6
LOTTO_SHUFFLES = 200
CRITICAL_THRESHOLD = 40
ATTACK_DICE_RANGE = 101
SUITS = ("♠", "◈", "♥", "♣")
_FACE_LABELS = {1: "A", 11: "J", 12: "Q", 13: "K"}
_BAR = "\n================================================="


def roll_die(rng: random.Random, sides: int = 6) -> int:
    """Roll a die with faces 1 to ``sides``."""
    if sides < 1:
        raise ValueError("a die needs at least one side")
    return rng.randint(1, sides)


def swap_shuffle(values: Sequence[T], count: int, rng: random.Random) -> list[T]:
    """Return a copy of ``values`` after ``count`` swaps of two random positions."""
    result = list(values)
    if not result:
        return result
    for _ in range(count):
        first = rng.randrange(len(result))
        second = rng.randrange(len(result))
        result[first], result[second] = result[second], result[first]
    return result


def lotto_draw(rng: random.Random) -> list[int]:
    """Shuffle the numbers 1 to 45 and take the first six."""
    numbers = swap_shuffle(range(1, LOTTO_MAX + 1), LOTTO_SHUFFLES, rng)
    return numbers[:LOTTO_COUNT]


def lotto_pick(rng: random.Random) -> list[int]:
    """Pick six numbers from 1 to 45, redrawing once for each earlier number it repeats.

    A redraw is not checked against the numbers already passed, so a repeat
    can survive.
    """
    picked: list[int] = []
    for _ in range(LOTTO_COUNT):
        number = rng.randint(1, LOTTO_MAX)
        for earlier in list(picked):
            if number == earlier:
                number = rng.randint(1, LOTTO_MAX)
        picked.append(number)
    return picked


@dataclass(frozen=True)
class Card:
    """A playing card with rank 1 (ace) to 13 (king)."""

    rank: int
    suit: str

    def __post_init__(self) -> None:
        if not 1 <= self.rank <= 13:
            raise ValueError(f"rank must be between 1 and 13, got {self.rank}")

    def rank_label(self) -> str:
        return _FACE_LABELS.get(self.rank, str(self.rank))


def draw_card(rng: random.Random) -> Card:
    """Draw a random rank and a random suit."""
    rank = rng.randint(1, 13)
    suit = SUITS[rng.randint(1, len(SUITS)) - 1]
    return Card(rank, suit)


def judge_parity_guess(dice1: int, dice2: int, guess: int) -> bool:
    """Tell whether ``guess`` (1 odd, 0 even) matches the parity of the dice total."""
    if guess not in (0, 1):
        raise ValueError(f"guess must be 0 (even) or 1 (odd), got {guess}")
    return (dice1 + dice2) % 2 == guess


@dataclass(frozen=True)
class Attack:
    dice: int
    critical: bool
    damage: float


def roll_attack(rng: random.Random, damage: int = 100) -> Attack:
    """Roll 0 to 100; 40 or more is a critical hit dealing 150 % damage."""
    dice = rng.randrange(ATTACK_DICE_RANGE)
    critical = dice >= CRITICAL_THRESHOLD
    dealt = critical_damage(damage) if critical else damage
    return Attack(dice, critical, dealt)


def _clear() -> None:
    """Clear the console with the system's clear command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        print("\033[2J\033[H", end="", flush=True)


def _wait(prompt: str = "") -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _read_int(prompt: str) -> int | None:
    while True:
        line = _wait(prompt)
        if line is None:
            return None
        try:
            return int(line.split()[0])
        except (IndexError, ValueError):
            continue


def _parity_game(rng: random.Random) -> None:
    while True:
        dice1, dice2 = roll_die(rng), roll_die(rng)
        print("주사위의 총합이 홀수인지 짝수인지 맞추시오.")
        while True:
            guess = _read_int("홀수는 1을 짝수는 0을 입력하세요.(종료는 : 2) : ")
            if guess is None:
                return
            if guess in (0, 1, 2):
                break
            print(_BAR.lstrip("\n") + "\n")
            print(f"{guess}, 잘못입력하셨습니다. 다시 입력하세요")
            print(_BAR + "\n\n\n")
        print(_BAR)
        if guess == 2:
            print("게임을 종료했습니다.\n")
            print(_BAR * 3)
            return
        choice = "홀수" if guess == 1 else "짝수"
        print(f"\n{guess}, 플레이어는 {choice}를 선택하셨습니다.")
        print(_BAR)
        total = dice1 + dice2
        kind = "짝수" if total % 2 == 0 else "홀수"
        print(f"\n주사위의 총합은 {dice1} + {dice2} = {total}, {kind}입니다.")
        if judge_parity_guess(dice1, dice2, guess):
            print("\n축하합니다. 정답입니다.")
        else:
            print("\n틀렸습니다.")
        print(_BAR * 3)


def _critical_game(rng: random.Random, sleep: Callable[[float], None]) -> None:
    while True:
        if _wait("아무키나 눌러 공격하세요!!!") is None:
            return
        attack = roll_attack(rng)
        print("[주사위 값이 40 % 이상이면 치명타 성공]")
        sleep(0.5)
        print("주사위를 굴리는 중입니다.", end="")
        for _ in range(4):
            sleep(1.0)
            print("....")
        print(f"\n주사위 값 : {attack.dice} ")
        if attack.critical:
            print("\n★★★★★치명타 성공!★★★★★")
            print(f"치명타 배율 : {CRITICAL_RATE * 100:.0f}")
            print(f"가한 데미지 : {attack.damage:.0f}")
        else:
            print("\n----------치명타 실패!----------")
            print(f"가한 데미지 : {attack.damage}")
        print("\n" * 9)
        print("아무키나 눌러 다시 실행하세요 .......")
        key = _wait("종료하려면 X 를 누르세요.")
        if key is None or key[:1] in ("x", "X"):
            print("\n\n종료합니다.")
            return
        _clear()


def _lotto(rng: random.Random, sleep: Callable[[float], None]) -> None:
    print("1등 로또 번호")
    for number in lotto_draw(rng):
        sleep(0.5)
        print(f"{number} ", end="", flush=True)
    print()
    print("\n다음주 1등 번호 뽑기")
    for number in lotto_pick(rng):
        sleep(0.5)
        print(f"{number} ", end="", flush=True)
    print()


def _card(rng: random.Random) -> None:
    card = draw_card(rng)
    print(f"CardNumber = {card.rank_label()}")
    print(f"CardShape = {card.suit}")


def _shuffle(rng: random.Random) -> None:
    numbers = list(range(1, 11))
    print("Shuffle 하기 전 \n")
    print(" ".join(map(str, numbers)) + " \n")
    shuffled = swap_shuffle(numbers, 1000, rng)
    print("Shuffle 한 후 \n")
    print(" ".join(map(str, shuffled)) + " ")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="consolegames-chance")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--fast", action="store_true", help="skip the pauses")
    sub = parser.add_subparsers(dest="program", required=True)
    for name in ("parity", "crit", "lotto", "card", "shuffle"):
        sub.add_parser(name)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    sleep: Callable[[float], None] = (lambda _seconds: None) if args.fast else time.sleep

    match args.program:
        case "parity":
            _parity_game(rng)
        case "crit":
            _critical_game(rng, sleep)
        case "lotto":
            _lotto(rng, sleep)
        case "card":
            _card(rng)
        case "shuffle":
            _shuffle(rng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())