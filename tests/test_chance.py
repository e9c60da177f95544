import random
from collections import Counter

import pytest

from consolegames.chance import (
    SUITS,
    Card,
    draw_card,
    judge_parity_guess,
    lotto_draw,
    lotto_pick,
    main,
    roll_attack,
    roll_die,
    swap_shuffle,
)


class _Fixed:
    """A random source that always returns the same value."""

    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        return self.value

    def randrange(self, *args):
        return self.value


def test_roll_die_stays_in_range_and_covers_faces():
    rng = random.Random(3)
    rolls = [roll_die(rng) for _ in range(600)]
    assert set(rolls) == set(range(1, 7))


def test_roll_die_rejects_no_sides():
    with pytest.raises(ValueError):
        roll_die(random.Random(0), 0)


def test_swap_shuffle_keeps_elements_and_input():
    original = list(range(1, 11))
    shuffled = swap_shuffle(original, 1000, random.Random(5))
    assert sorted(shuffled) == original
    assert original == list(range(1, 11))


def test_swap_shuffle_zero_swaps_is_copy():
    values = [4, 2, 9]
    assert swap_shuffle(values, 0, random.Random(1)) == values


def test_swap_shuffle_empty():
    assert swap_shuffle([], 10, random.Random(1)) == []


def test_lotto_draw_is_six_distinct_numbers():
    for seed in range(20):
        numbers = lotto_draw(random.Random(seed))
        assert len(numbers) == 6
        assert len(set(numbers)) == 6
        assert all(1 <= n <= 45 for n in numbers)


def test_lotto_pick_range():
    numbers = lotto_pick(random.Random(11))
    assert len(numbers) == 6
    assert all(1 <= n <= 45 for n in numbers)


def test_lotto_pick_redraw_can_repeat():
    assert lotto_pick(_Fixed(7)) == [7] * 6


@pytest.mark.parametrize(
    "rank, label",
    [(1, "A"), (11, "J"), (12, "Q"), (13, "K"), (10, "10"), (2, "2")],
)
def test_card_rank_label(rank, label):
    assert Card(rank, SUITS[0]).rank_label() == label


def test_card_rank_out_of_range():
    with pytest.raises(ValueError):
        Card(14, SUITS[0])


def test_draw_card_values():
    rng = random.Random(9)
    cards = [draw_card(rng) for _ in range(300)]
    assert {card.rank for card in cards} == set(range(1, 14))
    assert {card.suit for card in cards} == set(SUITS)


def test_judge_parity_guess():
    assert judge_parity_guess(3, 4, 1) is True
    assert judge_parity_guess(3, 4, 0) is False
    assert judge_parity_guess(2, 2, 0) is True
    assert judge_parity_guess(6, 1, 0) is False


def test_judge_parity_guess_rejects_bad_guess():
    with pytest.raises(ValueError):
        judge_parity_guess(1, 2, 2)


def test_roll_attack_threshold():
    hit = roll_attack(_Fixed(40))
    assert hit.critical is True
    assert hit.damage == 150.0
    miss = roll_attack(_Fixed(39))
    assert miss.critical is False
    assert miss.damage == 100


def test_roll_attack_invariant():
    rng = random.Random(2)
    attacks = [roll_attack(rng) for _ in range(500)]
    assert all(0 <= a.dice <= 100 for a in attacks)
    assert all(a.critical == (a.dice >= 40) for a in attacks)
    counts = Counter(a.critical for a in attacks)
    assert counts[True] > counts[False]


def test_main_card(capsys):
    assert main(["--seed", "1", "card"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("CardNumber = ")
    assert "CardShape = " in out


def test_main_parity_quit(monkeypatch, capsys):
    answers = iter(["7", "2"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--seed", "4", "parity"]) == 0
    out = capsys.readouterr().out
    assert "7, 잘못입력하셨습니다. 다시 입력하세요" in out
    assert "게임을 종료했습니다." in out