"""A dice-driven walk home: rivers change stats, mountains hold monsters or rest."""

from __future__ import annotations

import argparse
import enum
import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from consolegames.art import art

DICE_RANGE = 10
ROADS_TO_CLEAR = 6
HEAL_AMOUNT = 10
REST_THRESHOLD = 8
START_MAX_HP = 100
START_DAMAGE = 10

_BAR = "■" * 46
_DASHES = "ㅡ" * 30
_STARS = "★☆" * 20
_ATS = "＠" * 34


class Monster(enum.Enum):
    """A monster met on a mountain: name, hit points, damage and picture."""

    BAT = ("박쥐", 20, 8, "bat", "를", "가")
    BEAR = ("야생의 곰", 30, 10, "bear", "을", "이")
    SLIME = ("푸르댕댕 슬라임", 15, 5, "slime", "을", "이")

    def __init__(
        self,
        label: str,
        hp: int,
        damage: int,
        picture: str,
        object_particle: str,
        subject_particle: str,
    ) -> None:
        self.label = label
        self.hp = hp
        self.damage = damage
        self.picture = picture
        self.object_particle = object_particle
        self.subject_particle = subject_particle


class MapKind(enum.Enum):
    RIVER = "강"
    MOUNTAIN = "산"
    ROAD = "길"


def _check_roll(roll: int) -> None:
    if not 1 <= roll <= DICE_RANGE:
        raise ValueError(f"roll must be between 1 and {DICE_RANGE}, got {roll}")


def map_for_roll(roll: int) -> MapKind:
    """Rolls 1-3 lead to the river, 4-7 to the mountain, 8-10 to the road."""
    _check_roll(roll)
    if roll <= 3:
        return MapKind.RIVER
    if roll <= 7:
        return MapKind.MOUNTAIN
    return MapKind.ROAD


class RiverEffect(enum.Enum):
    DAMAGE_UP = "[ 공격력이 1 ▲ 증가했습니다. ]"
    DAMAGE_DOWN = "[ 공격력이 1 ▼ 감소했습니다. ]"
    MAX_HP_UP = "[ 최대체력이 5 ▲ 증가했습니다.]"
    MAX_HP_DOWN = "[ 최대체력이 5 ▼ 감소했습니다.]"
    NOTHING = "[ 스탯의 변화 없이 강을 통과했습니다. ]"


def river_effect(roll: int) -> RiverEffect:
    """Rolls 1-3 raise damage, 4-5 lower it, 6-7 raise max HP, 8-9 lower it, 10 nothing."""
    _check_roll(roll)
    if roll <= 3:
        return RiverEffect.DAMAGE_UP
    if roll <= 5:
        return RiverEffect.DAMAGE_DOWN
    if roll <= 7:
        return RiverEffect.MAX_HP_UP
    if roll <= 9:
        return RiverEffect.MAX_HP_DOWN
    return RiverEffect.NOTHING


@dataclass(frozen=True)
class BattleResult:
    """The outcome of a fight.

    ``exchanges`` holds, for every blow the player strikes, the monster's
    hit points after it and the player's hit points after the reply.
    """

    monster: Monster
    player_hp: int
    monster_hp: int
    exchanges: tuple[tuple[int, int], ...]

    @property
    def won(self) -> bool:
        return self.monster_hp <= 0


def fight(player_hp: int, player_damage: int, monster: Monster) -> BattleResult:
    """The player strikes first; the monster replies until one side falls."""
    monster_hp = monster.hp
    exchanges: list[tuple[int, int]] = []
    while True:
        monster_hp -= player_damage
        if monster_hp <= 0:
            exchanges.append((monster_hp, player_hp))
            break
        player_hp -= monster.damage
        exchanges.append((monster_hp, player_hp))
        if player_hp <= 0:
            break
    return BattleResult(monster, player_hp, monster_hp, tuple(exchanges))


@dataclass
class Player:
    max_hp: int = START_MAX_HP
    hp: int = START_MAX_HP
    damage: int = START_DAMAGE

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def heal(self, amount: int) -> int:
        """Restore ``amount`` hit points, never above the maximum; return the new HP."""
        self.hp = min(self.hp + amount, self.max_hp)
        return self.hp

    def apply_river(self, effect: RiverEffect) -> None:
        match effect:
            case RiverEffect.DAMAGE_UP:
                self.damage += 1
            case RiverEffect.DAMAGE_DOWN:
                self.damage -= 1
            case RiverEffect.MAX_HP_UP:
                self.max_hp += 5
            case RiverEffect.MAX_HP_DOWN:
                self.max_hp -= 5
            case RiverEffect.NOTHING:
                pass


def _press_key(prompt: str = "") -> None:
    try:
        input(prompt)
    except EOFError:
        pass


@dataclass
class Game:
    """One run of the walk: roll for a place each turn until six roads or death."""

    rng: random.Random = field(default_factory=random.Random)
    player: Player = field(default_factory=Player)
    out: Callable[[str], None] = print
    wait: Callable[[str], None] = _press_key
    sleep: Callable[[float], None] = time.sleep
    road_count: int = 0
    mountain_count: int = 0
    river_count: int = 0
    battle_count: int = 0

    @property
    def cleared(self) -> bool:
        return self.road_count >= ROADS_TO_CLEAR

    def _clear(self) -> None:
        self.out("\033[2J\033[H")

    def _count_down(self) -> None:
        for number in (3, 2, 1):
            self.sleep(0.75)
            self.out(str(number))

    def _return_to_map(self) -> None:
        self.wait("\n아무 키를 눌러 맵 선택 화면으로 되돌아가세요.\n")
        self.out("\n잠시 후 맵 선택 화면으로 되돌아갑니다....")
        self._count_down()
        self._clear()

    def _roll_animation(self) -> None:
        self.out(art("dice"))
        self.out("\t\t\t        주사위를 굴립니다.")
        for _ in range(3):
            self.sleep(0.5)
            self.out("주사위 굴리는 중...... \t")

    def _intro(self) -> None:
        self.out(art("castle"))
        self.out(f"\t{_BAR}\n")
        self.out("\t※ 안내사항")
        self.out("\t1. 콘솔 글꼴을 NSimsun으로 바꿔주세요")
        self.out("\t2. 안내에 맞춰 천천히 키를 눌러주세요.\n\n")
        self.out(f"\t{_BAR}\n")
        self.wait("\t아무키나 눌러 게임을 시작하세요 ......")
        self.out("\n\n게임을 시작합니다.")
        self._count_down()
        self._clear()

    def _map_screen(self) -> None:
        p = self.player
        self.out(f"{_BAR}\n")
        self.out(f"■■ \t    게임목표! : 길을 {ROADS_TO_CLEAR}번 걸으시오\n")
        self.out(
            f"■■ \t    ( 길을 걸은 횟수  [{self.road_count}] ) "
            f"( 산에 오른 횟수  [{self.mountain_count}] ) "
            f"( 강에 들린 횟수  [{self.river_count}] )     ■■ \n"
        )
        self.out(f"{_BAR}\n")
        self.out("■■ \t\t\t\t  [1, 2, 3]       = 강")
        self.out("■■ \t\t\t\t  [4, 5, 6, 7]    = 산")
        self.out("■■ \t\t\t\t  [8, 9, 10]      = 길\n")
        self.out(f"{_BAR}\n")
        self.out(
            f"   \t\t전투한 총 횟수  [{self.battle_count}]  "
            f"\t\t플레이어의 최대 체력  [{p.max_hp}]\n"
        )
        self.out(
            f"   \t\t플레이어의 공격력  [{p.damage}]         "
            f"현재 플레이어의 체력  [{p.hp}]\n"
        )
        self.out(_BAR)
        self.out("   \t\t\t      주사위를 굴려 맵을 이동합니다.\n")
        self.out(art("dice"))
        self.wait("\t\t\t  아무키를 누르면 주사위를 굴립니다.......\n")
        self._clear()

    def _arrival(self, roll: int, where: str) -> None:
        self.out(f"{_BAR}\n")
        self.out(f"나온 주사위 값 : ▨ {roll} ---------> {where}\n")
        self.out(f"{_BAR}\n")

    def _river(self, roll: int) -> None:
        self.river_count += 1
        self._arrival(roll, "강으로 이동합니다.")
        self.out(art("river"))
        self.out("갈증을 견디지 못해 당신은 강의 물을 허겁지겁마십니다.\n")
        if self.river_count > 2:
            self.out("(물을 안마실 수는 없냐구요?... 네 ^^/) ")
        self.wait("아무키를 눌러 다음으로 ...\n")
        self._clear()
        self.out(f"{_BAR}\n")
        self.out("강에 도착한 당신은 랜덤한 주사위의 값으로 스탯에 영향을 받습니다. \n")
        self.out(f"{_BAR}\n")
        self.out("주사위가 [1 ~ 3]이 나오면 [공격력 1] ▲ 증가시킵니다.\n")
        self.out("주사위가 [4 ~ 5]이 나오면 [공격력 1] ▼ 감소시킵니다.\n")
        self.out("주사위가 [6 ~ 7]이 나오면 [최대체력 5] ▲ 증가시킵니다.\n")
        self.out("주사위가 [8 ~ 9]이 나오면 [최대체력 5] ▼ 감소시킵니다.\n")
        self.out("주사위가 [10]이 나오면 그냥 지나갑니다.\n")
        self.out(f"{_BAR}\n")
        self.wait("\t아무키나 눌러 주사위를 굴려보세요.")
        self._roll_animation()
        event = self.rng.randint(1, DICE_RANGE)
        effect = river_effect(event)
        self.out("\n\n" + "-" * 57 + "\n")
        self.out(f"\t   ★☆★☆  주사위의 값은 {event}  ★☆★☆\n")
        self.out(f"\t      {effect.value}\n")
        self.player.apply_river(effect)
        self.out("\n" + "-" * 57)
        self._return_to_map()

    def _mountain(self, roll: int) -> None:
        self._arrival(roll, "산을 올라갑니다.")
        self.out(art("mountain"))
        self.mountain_count += 1
        choice = self.rng.randint(1, DICE_RANGE)
        self.out("랜덤전투주사위의 값이 1 ~ 8일  경우 몬스터와 전투합니다.")
        self.out("랜덤전투주사위의 값이 9 ~ 10일 경우 체력을 회복합니다.\n")
        self.out(f"{_BAR}\n")
        self.wait("아무키를 눌러 주사위를 굴려보세요.")
        self.out(f"\n\n★★★★★★★[  {choice}  ]★★★★★★★")
        self.sleep(1.5)
        self._clear()
        if choice > REST_THRESHOLD:
            self._rest()
        else:
            self._battle()
            self.battle_count += 1

    def _rest(self) -> None:
        self.out("\n 플레이어는 잠시 쉬면서 경치를 바라봅니다.")
        self.out(_DASHES)
        self.out(f" ▲ 플레이어의 체력이 {HEAL_AMOUNT} 회복되었습니다.")
        hp = self.player.heal(HEAL_AMOUNT)
        self.out(f"현재 플레이어의 체력 : {hp} 입니다.\n")
        self.out(art("mountain_heal"))
        self._return_to_map()

    def _battle(self) -> None:
        self.out("전투가 시작되었습니다.")
        monster = list(Monster)[self.rng.randint(1, len(Monster)) - 1]
        name = monster.label
        self.out(f"{name}{monster.subject_particle} 나타났습니다.\n")
        self.out(art(monster.picture))
        self.wait("아무키나 눌러 공격하세요!!\n")
        self._clear()
        self.out(_BAR)
        result = fight(self.player.hp, self.player.damage, monster)
        for monster_hp, player_hp in result.exchanges:
            self.out(f"{name}에게 {self.player.damage}의 데미지를 입혔습니다.")
            self.out(_DASHES)
            self.sleep(0.5)
            if monster_hp <= 0:
                self.out(f"{name}의 남은 체력 : 0\n")
                self.sleep(0.5)
                self.out(f"{name}{monster.object_particle} 처치했습니다!")
                self.out("전투가 종료되었습니다\n")
                self.out(f"{_BAR}\n")
                break
            self.out(f"{name}의 남은 체력 : {monster_hp}\n")
            self.sleep(0.5)
            self.out(f"{name}{monster.subject_particle} 당신을 공격했습니다!!")
            self.out(_DASHES)
            self.sleep(0.5)
            self.out(f"★★★ -{monster.damage} ★★★")
            self.sleep(0.5)
            self.out(f"당신의 현재 체력 : {player_hp}\n")
            self.sleep(0.5)
        self.player.hp = result.player_hp
        if result.won:
            self._return_to_map()
        else:
            self._show_game_over()

    def _road(self, roll: int) -> None:
        self.road_count += 1
        self._arrival(roll, "길을 걷습니다.")
        self.out(art("road"))
        self._return_to_map()

    def _show_game_over(self) -> None:
        self._clear()
        self.out(_ATS)
        self.out(_ATS + "\n")
        self.out("＠＠＠＠＠           당신의 체력이 0이 되었습니다.    ＠＠＠＠＠＠＠")
        self.out("＠＠＠＠＠                   GAME OVER                ＠＠＠＠＠＠＠")
        self.out(art("game_over"))
        self.out(_ATS)
        self.out(_ATS)

    def _show_clear(self) -> None:
        self._clear()
        self.out(_STARS)
        self.out(_STARS)
        self.out(f"★☆★☆★☆★☆★☆    길을 {ROADS_TO_CLEAR}번 걸었습니다! GAME CLEAR   ★☆★☆★☆★☆★☆★")
        self.out(art("game_clear"))
        self.out(_STARS)
        self.out(_STARS)

    def turn(self) -> MapKind:
        """Show the map, roll for a place, play it out and return where the player went."""
        self._map_screen()
        self._roll_animation()
        roll = self.rng.randint(1, DICE_RANGE)
        self._clear()
        kind = map_for_roll(roll)
        match kind:
            case MapKind.RIVER:
                self._river(roll)
            case MapKind.MOUNTAIN:
                self._mountain(roll)
            case MapKind.ROAD:
                self._road(roll)
        if self.cleared:
            self._show_clear()
        return kind

    def play(self) -> bool:
        """Play until the player has walked six roads or died; tell whether it was cleared."""
        self._intro()
        while not self.cleared and self.player.alive:
            self.turn()
        return self.cleared


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="consolegames-minigame")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--fast", action="store_true", help="skip the pauses")
    args = parser.parse_args(argv)

    sleep: Callable[[float], None] = (lambda _seconds: None) if args.fast else time.sleep
    game = Game(rng=random.Random(args.seed), sleep=sleep)
    game.play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())