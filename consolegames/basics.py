"""Small arithmetic helpers and the console exercises built on them."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

DEFAULT_PI = 3.141592
CRITICAL_RATE = 1.5

# Type sizes in bytes on the 64-bit Windows data model the exercises were run on.
_TYPE_SIZES = {
    "char": 1,
    "short": 2,
    "int": 4,
    "long": 4,
    "long long": 8,
    "float": 4,
    "double": 8,
    "long double": 8,
}


def plus_two_numbers(number1: int, number2: int) -> int:
    """Return the sum of two numbers."""
    return number1 + number2


def mul_three_numbers(number1: int, number2: int, number3: int) -> int:
    """Return the product of three numbers."""
    return number1 * number2 * number3


def critical_damage(damage: float) -> float:
    """Return the damage of a critical hit (150 % of the base damage)."""
    return damage * CRITICAL_RATE


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """Divide ``a`` by ``b``; dividing by zero raises ZeroDivisionError."""
    return a / b


def c_remainder(a: int, b: int) -> int:
    """Integer remainder that takes the sign of the dividend, as in C."""
    if b == 0:
        raise ZeroDivisionError("integer remainder by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return a - b * quotient


def apply_heal(current_hp: int, heal: int, max_hp: int) -> int:
    """Heal ``current_hp`` by ``heal`` without going above ``max_hp``."""
    return min(current_hp + heal, max_hp)


def calculate_three(x: int, y: int, z: int) -> int:
    """Return ``x + y * z``."""
    return x + y * z


def deform_calculate_three(x: int, y: int, z: int) -> int:
    """Return ``(x - y) * (y + z) * (z % x)`` with a C-style remainder."""
    return (x - y) * (y + z) * c_remainder(z, x)


def circle_area(radius: int, pi: float = DEFAULT_PI) -> float:
    """Return the area of a circle of the given radius."""
    return pi * (radius * radius)


def count_up(limit: int = 10) -> Iterator[int]:
    """Yield the numbers from 1 to ``limit``."""
    yield from range(1, limit + 1)


def square_rows(side: int) -> list[str]:
    """Return the rows of a square of ``*`` with the given side."""
    return ["* " * side for _ in range(side)]


def times_table() -> Iterator[tuple[int, int, int]]:
    """Yield ``(dan, n, dan * n)`` for dans 2 to 9 and n 1 to 9."""
    for dan in range(2, 10):
        for n in range(1, 10):
            yield dan, n, dan * n


def type_sizes() -> dict[str, int]:
    """Return the size in bytes of the basic numeric types."""
    return dict(_TYPE_SIZES)


def _hello_lines(number: int = 10, shown: int = 100) -> list[str]:
    pair = (5, 7)
    triple = (10, 20, 30)
    return [
        'Hello Wolrd! " \t\t\tHello World!',
        f"Hello Wolrd! {number - 2} \n",
        f"입력 값은 : {shown} 입니다. \n",
        f"입력 값은 : {pair[0]}, {pair[1]} 입니다. ",
        f"두 숫자의 합은 {plus_two_numbers(*pair)} 입니다. \n",
        f"입력 값은 : {triple[0]}, {triple[1]}, {triple[2]}, 입니다 ",
        f"세 숫자의 곱은 {mul_three_numbers(*triple)} 입니다. \n",
    ]


def _print_profile(name: str, age: int, phone: str) -> None:
    print(f"이름 : {name} ")
    print(f"나이 : {age}세 ")
    print(f"전화번호 : {phone} ")


def _print_calc() -> None:
    num1, num2 = 12.4, 5.0
    print(f"덧셈 : {num1:.1f} + {num2:.1f} = {add(num1, num2):.1f}")
    print(f"뺄셈 : {num1:.1f} - {num2:.1f} = {subtract(num1, num2):.1f}")
    print(f"곱셈 : {num1:.1f} * {num2:.1f} = {multiply(num1, num2):.1f}")
    print(f"나눗셈 : {num1:.1f} / {num2:.1f} = {divide(num1, num2):.1f}")
    print(f"나머지 : {num1:.1f} % {num2:.1f} = {c_remainder(int(num1), int(num2))}")


def _print_heal() -> None:
    max_hp, current_hp, heal = 50, 20, 10000
    print(f"힐 받기 전 체력 : {current_hp}")
    current_hp = apply_heal(current_hp, heal, max_hp)
    print(f"힐량 : {heal}")
    print(f"현재 체력 : {current_hp}")


def _read_ints(prompt: str, count: int) -> list[int]:
    while True:
        parts = input(prompt).split()
        try:
            values = [int(part) for part in parts]
        except ValueError:
            continue
        if len(values) >= count:
            return values[:count]


def _print_expr(values: Sequence[int]) -> None:
    if not values:
        values = _read_ints("정수 3개를 입력하세요 (숫자 숫자 숫자) : ", 3)
    elif len(values) != 3:
        raise SystemExit("expr needs exactly three integers")
    x, y, z = values
    result = calculate_three(x, y, z)
    deformed = deform_calculate_three(x, y, z)
    print("\n계산 결과")
    print(f"{x} + {y} * {z} = {result}")
    print("\n변형계산식")
    print(f"({x} - {y}) * ({y} + {z}) * ({z} % {x}) = {deformed}")
    print(f"{x - y} * {y + z} * {c_remainder(z, x)} = {deformed}")


def _print_sizes() -> None:
    sizes = type_sizes()
    print(f"char 의 크기는? {sizes['char']} byte. ")
    print(f"short의 크기는? {sizes['short']} byte. ")
    print(f"int  의 크기는? {sizes['int']} byte. ")
    print(f"long 의 크기는? {sizes['long']} byte. ")
    print(f"long long 의 크기는? {sizes['long long']} byte. \n")
    print(f"float  의 크기는? {sizes['float']} byte. ")
    print(f"double 의 크기는? {sizes['double']} byte. ")
    print(f"long double 의 크기는? {sizes['long double']} byte. ")


def _print_circle(radius: int | None) -> None:
    if radius is None:
        radius = _read_ints("반지름을 입력하세요 : ", 1)[0]
    area = circle_area(radius)
    print(f"원의 넓이: {DEFAULT_PI:f} * ({radius} * {radius}) = {area:f} ")


def _print_count() -> None:
    for count in count_up(10):
        print(f"Hello World! 몇 번째 돌고 있는지? {count} ")


def _print_square(side: int | None) -> None:
    if side is None:
        side = _read_ints("정사각형의 한 변을 입력하세요 : ", 1)[0]
    for row in square_rows(side):
        print(row)


def _print_gugudan() -> None:
    current = None
    for dan, n, product in times_table():
        if dan != current:
            if current is not None:
                print()
            print(f"{dan} 단")
            current = dan
        print(f"{dan} * {n} = {product} ")
    print()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="consolegames-basics")
    sub = parser.add_subparsers(dest="program", required=True)
    sub.add_parser("hello")
    profile = sub.add_parser("profile")
    profile.add_argument("--name", default="홍길동")
    profile.add_argument("--age", type=int, default=20)
    profile.add_argument("--phone", default="[phone]")
    sub.add_parser("crit")
    sub.add_parser("calc")
    sub.add_parser("heal")
    expr = sub.add_parser("expr")
    expr.add_argument("values", nargs="*", type=int)
    sub.add_parser("sizes")
    circle = sub.add_parser("circle")
    circle.add_argument("radius", nargs="?", type=int)
    sub.add_parser("count")
    square = sub.add_parser("square")
    square.add_argument("side", nargs="?", type=int)
    sub.add_parser("gugudan")
    args = parser.parse_args(argv)

    match args.program:
        case "hello":
            for line in _hello_lines():
                print(line)
        case "profile":
            _print_profile(args.name, args.age, args.phone)
        case "crit":
            print(f"크리티컬 데미지 : {critical_damage(100):.0f}% ")
        case "calc":
            _print_calc()
        case "heal":
            _print_heal()
        case "expr":
            _print_expr(args.values)
        case "sizes":
            _print_sizes()
        case "circle":
            _print_circle(args.radius)
        case "count":
            _print_count()
        case "square":
            _print_square(args.side)
        case "gugudan":
            _print_gugudan()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())