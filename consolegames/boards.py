"""Grid games: a moving marker, a walled walker and a sliding puzzle."""

from __future__ import annotations

import argparse
import enum
import itertools
import os
import random
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field

MIN_PUZZLE = 3
MAX_PUZZLE = 6
SHUFFLE_PASSES = 50
BLANK = 0


def marker_frames(size: int = 5) -> list[str]:
    """Return a row of ``*`` and then one frame per step with ``0`` moving right."""
    frames = ["* " * size]
    for position in range(size):
        frames.append("".join("0 " if cell == position else "* " for cell in range(size)))
    return frames


class Direction(enum.Enum):
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)


_KEYS = {"a": Direction.LEFT, "d": Direction.RIGHT, "w": Direction.UP, "s": Direction.DOWN}


def direction_for_key(key: str) -> Direction | None:
    """Map a, d, w, s (either case) to a direction; None for any other key."""
    return _KEYS.get(key.lower()) if len(key) == 1 else None


@dataclass
class WalkerGrid:
    """A square of floor inside a wall, with a player that cannot leave it."""

    size: int = 6
    x: int = 3
    y: int = 3
    wall: str = "#"
    floor: str = "*"
    player: str = "0"

    def __post_init__(self) -> None:
        if self.size < 3:
            raise ValueError("the grid needs room inside its wall")
        if not (self._inside(self.x) and self._inside(self.y)):
            raise ValueError("the player must start inside the wall")

    def _inside(self, coordinate: int) -> bool:
        return 1 <= coordinate <= self.size - 2

    def move(self, direction: Direction) -> bool:
        """Step in ``direction`` unless a wall is there; tell whether it moved."""
        dy, dx = direction.value
        ny, nx = self.y + dy, self.x + dx
        if not (self._inside(nx) and self._inside(ny)):
            return False
        self.x, self.y = nx, ny
        return True

    def _cell(self, row: int, col: int) -> str:
        if (col, row) == (self.x, self.y):
            return self.player
        if row in (0, self.size - 1) or col in (0, self.size - 1):
            return self.wall
        return self.floor

    def render(self) -> str:
        return "\n".join(
            "".join(f"{self._cell(row, col)} " for col in range(self.size))
            for row in range(self.size)
        )


def _solved_tiles(size: int) -> list[list[int]]:
    tiles = [[row * size + col + 1 for col in range(size)] for row in range(size)]
    tiles[-1][-1] = BLANK
    return tiles


def _render_tiles(tiles: list[list[int]]) -> str:
    return "\n".join("".join(f"{value:4d}" for value in row) for row in tiles)


@dataclass
class SlidingPuzzle:
    """A sliding puzzle of ``size`` x ``size`` tiles with one blank (0)."""

    size: int
    tiles: list[list[int]] = field(default_factory=list)
    _blank: tuple[int, int] = field(init=False, repr=False, default=(0, 0))

    def __post_init__(self) -> None:
        if not MIN_PUZZLE <= self.size <= MAX_PUZZLE:
            raise ValueError(
                f"size must be between {MIN_PUZZLE} and {MAX_PUZZLE}, got {self.size}"
            )
        if not self.tiles:
            self.tiles = _solved_tiles(self.size)
        else:
            self.tiles = [list(row) for row in self.tiles]
        if len(self.tiles) != self.size or any(len(row) != self.size for row in self.tiles):
            raise ValueError("tiles must form a square of the given size")
        flat = sorted(itertools.chain.from_iterable(self.tiles))
        if flat != list(range(self.size * self.size)):
            raise ValueError("tiles must hold each number from 0 once")
        self._blank = next(
            (r, c)
            for r, row in enumerate(self.tiles)
            for c, value in enumerate(row)
            if value == BLANK
        )

    @classmethod
    def shuffled(cls, size: int, rng: random.Random) -> SlidingPuzzle:
        """Shuffle a solved board and put the blank in the bottom-right corner.

        The result is not guaranteed to be solvable.
        """
        if not MIN_PUZZLE <= size <= MAX_PUZZLE:
            raise ValueError(f"size must be between {MIN_PUZZLE} and {MAX_PUZZLE}, got {size}")
        tiles = _solved_tiles(size)
        for _ in range(SHUFFLE_PASSES):
            for i, j in itertools.product(range(size), repeat=2):
                a, b = rng.randrange(size), rng.randrange(size)
                tiles[a][b], tiles[i][j] = tiles[i][j], tiles[a][b]
        r, c = next(
            (r, c)
            for r, row in enumerate(tiles)
            for c, value in enumerate(row)
            if value == BLANK
        )
        tiles[r][c], tiles[-1][-1] = tiles[-1][-1], tiles[r][c]
        return cls(size, tiles)

    @property
    def blank(self) -> tuple[int, int]:
        return self._blank

    def move(self, direction: Direction) -> bool:
        """Move the blank one step; tell whether it moved."""
        row, col = self._blank
        dy, dx = direction.value
        nr, nc = row + dy, col + dx
        if not (0 <= nr < self.size and 0 <= nc < self.size):
            return False
        self.tiles[row][col], self.tiles[nr][nc] = self.tiles[nr][nc], self.tiles[row][col]
        self._blank = (nr, nc)
        return True

    def is_solved(self) -> bool:
        return self.tiles == _solved_tiles(self.size)

    def render(self) -> str:
        return _render_tiles(self.tiles)

    def render_solution(self) -> str:
        return _render_tiles(_solved_tiles(self.size))


def _clear() -> None:
    """Clear the console with the system's clear command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        print("\033[2J\033[H", end="", flush=True)


def _read_key(prompt: str = "") -> str | None:
    try:
        return input(prompt)[:1]
    except EOFError:
        return None


def _read_int(prompt: str) -> int | None:
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return None
        try:
            return int(line.split()[0])
        except (IndexError, ValueError):
            continue


def _marker() -> None:
    for frame in marker_frames():
        print(frame)
        if _read_key() is None:
            return
        _clear()


def _walk() -> None:
    grid = WalkerGrid()
    while True:
        print(grid.render())
        print()
        key = _read_key()
        if key is None:
            return
        direction = direction_for_key(key)
        if direction is not None:
            grid.move(direction)
        _clear()


def _play_puzzle(puzzle: SlidingPuzzle) -> None:
    while True:
        if puzzle.is_solved():
            print("축하합니다. 클리어하셨습니다!!")
            _read_key()
            return
        print("\n정답 미리보기")
        print(puzzle.render_solution())
        print(f"\n현재 행렬의 크기 : {puzzle.size}\n")
        print(puzzle.render())
        print("\nQ를 입력하면 게임 종료.")
        print("[a←], [d→], [w↑], [s↓] 를 입력해서 0의 위치를 이동하세요")
        key = _read_key()
        if key is None or key in ("q", "Q"):
            print("\n게임을 종료합니다.")
            return
        direction = direction_for_key(key)
        if direction is not None:
            puzzle.move(direction)
        _clear()


def _slide(rng: random.Random) -> None:
    while True:
        size = _read_int("행렬을 몇 줄로 하실 건지 입력하세요 (3 ~ 6 사이의 값, 0 => 게임종료) : ")
        if size is None or size == 0:
            print("게임을 종료합니다.")
            return
        if MIN_PUZZLE <= size <= MAX_PUZZLE:
            _play_puzzle(SlidingPuzzle.shuffled(size, rng))
            return
        print("다시입력하세요.")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="consolegames-boards")
    parser.add_argument("--seed", type=int, default=None)
    sub = parser.add_subparsers(dest="program", required=True)
    for name in ("marker", "walk", "slide"):
        sub.add_parser(name)
    args = parser.parse_args(argv)

    match args.program:
        case "marker":
            _marker()
        case "walk":
            _walk()
        case "slide":
            _slide(random.Random(args.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())