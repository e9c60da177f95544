import io

import pytest

from consolegames import basics


@pytest.mark.parametrize("a,b", [(10, 20), (5, 7), (-3, 8), (0, 0)])
def test_plus_two_numbers_commutes_and_has_identity(a, b):
    assert basics.plus_two_numbers(a, b) == basics.plus_two_numbers(b, a)
    assert basics.plus_two_numbers(a, 0) == a


@pytest.mark.parametrize("x,y", [(10, 20), (3, -4), (7, 7)])
def test_mul_three_numbers_identity_and_zero(x, y):
    assert basics.mul_three_numbers(x, 1, 1) == x
    assert basics.mul_three_numbers(x, y, 0) == 0
    assert basics.mul_three_numbers(x, y, 1) == basics.mul_three_numbers(y, x, 1)


def test_critical_damage_pinned_and_linear():
    assert basics.critical_damage(100) == 150
    assert basics.critical_damage(0) == 0
    assert basics.critical_damage(40) == pytest.approx(2 * basics.critical_damage(20))


@pytest.mark.parametrize("a,b", [(12.4, 5.0), (-1.5, 2.25), (100.0, 0.5)])
def test_arithmetic_round_trips(a, b):
    assert basics.subtract(basics.add(a, b), b) == pytest.approx(a)
    assert basics.divide(basics.multiply(a, b), b) == pytest.approx(a)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        basics.divide(1.0, 0.0)


def test_c_remainder_takes_sign_of_dividend():
    assert basics.c_remainder(-7, 2) == -1
    assert basics.c_remainder(7, -2) == 1


@pytest.mark.parametrize("a", range(-9, 10))
@pytest.mark.parametrize("b", [-4, -3, 3, 4])
def test_c_remainder_invariant(a, b):
    r = basics.c_remainder(a, b)
    assert abs(r) < abs(b)
    assert (a - r) % b == 0
    assert r == 0 or (r > 0) == (a > 0)


def test_c_remainder_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        basics.c_remainder(5, 0)


def test_apply_heal_caps_at_max():
    assert basics.apply_heal(20, 10000, 50) == 50
    assert basics.apply_heal(20, 0, 50) == 20
    assert basics.apply_heal(10, 5, 50) <= 50


def test_calculate_three_identities():
    assert basics.calculate_three(7, 0, 99) == 7
    assert basics.calculate_three(0, 6, 1) == 6


def test_deform_calculate_three_zero_and_error():
    assert basics.deform_calculate_three(4, 4, 9) == 0
    assert basics.deform_calculate_three(3, 1, 6) == 0
    with pytest.raises(ZeroDivisionError):
        basics.deform_calculate_three(0, 1, 2)


def test_circle_area():
    assert basics.circle_area(1) == pytest.approx(3.141592)
    assert basics.circle_area(0) == 0
    assert basics.circle_area(2) == pytest.approx(4 * basics.circle_area(1))


def test_count_up():
    assert list(basics.count_up(10)) == list(range(1, 11))
    assert list(basics.count_up(0)) == []


def test_square_rows():
    assert basics.square_rows(3) == ["* * * "] * 3
    assert basics.square_rows(0) == []


def test_times_table_shape():
    table = list(basics.times_table())
    assert table[0] == (2, 1, 2)
    assert [dan for dan, _, _ in table[::9]] == list(range(2, 10))
    assert all(product == dan * n for dan, n, product in table)
    assert len(table) == 8 * 9


def test_type_sizes_ordering():
    sizes = basics.type_sizes()
    assert sizes["char"] == 1
    assert sizes["char"] <= sizes["short"] <= sizes["int"] <= sizes["long"] <= sizes["long long"]
    assert sizes["float"] <= sizes["double"] <= sizes["long double"]


def test_main_hello(capsys):
    assert basics.main(["hello"]) == 0
    out = capsys.readouterr().out
    assert "Hello World!" in out
    assert "입력 값은 : 100 입니다." in out


def test_main_heal(capsys):
    basics.main(["heal"])
    out = capsys.readouterr().out
    assert "현재 체력 : 50" in out
    assert "힐량 : 10000" in out


def test_main_square_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    basics.main(["square"])
    out = capsys.readouterr().out
    assert out.count("* * * \n") == 3


def test_main_expr_requires_three_values():
    with pytest.raises(SystemExit):
        basics.main(["expr", "1", "2"])


def test_main_calc_prints_sum_line(capsys):
    basics.main(["calc"])
    out = capsys.readouterr().out
    assert "덧셈 : 12.4 + 5.0 =" in out