import random
from datetime import date
from decimal import Decimal

import pytest

from payreport.logic.metrics import (
    MINIMUM_WAGE,
    apply_raise,
    find_oldest,
    minimum_wage_multiple,
    minimum_wage_multiples,
    oldest_with_age,
    percent_increase,
    total_salary,
)
from payreport.models import Employee
from payreport.services.date_utils import age_in_years


def test_percent_increase_rounds_half_up():
    assert percent_increase(Decimal("1910.85"), 10) == Decimal("2101.94")
    assert percent_increase(Decimal("1709.45"), 10) == Decimal("1880.40")
    assert percent_increase(Decimal("2157.15"), 10) == Decimal("2372.87")


def test_percent_increase_zero_is_identity():
    for raw in ["2009.44", "0.00", "9836.14", "1.01"]:
        assert percent_increase(Decimal(raw), 0) == Decimal(raw)


def test_apply_raise_updates_every_salary(employees):
    before = [emp.salary for emp in employees]
    apply_raise(employees, 10)
    assert [emp.salary for emp in employees] == [percent_increase(s, 10) for s in before]
    assert all(emp.salary.as_tuple().exponent == -2 for emp in employees)


def test_total_salary_of_seed(employees):
    assert total_salary(employees) == Decimal("25386.97")


def test_total_salary_is_order_invariant(employees):
    shuffled = list(employees)
    random.Random(7).shuffle(shuffled)
    assert total_salary(shuffled) == total_salary(employees)


def test_total_salary_empty():
    assert total_salary([]) == Decimal("0.00")


def test_minimum_wage_multiple():
    assert MINIMUM_WAGE == Decimal("1212.00")
    assert minimum_wage_multiple(Decimal("9836.14")) == Decimal("8.12")
    assert minimum_wage_multiple(Decimal("1212.00")) == Decimal("1.00")


def test_minimum_wage_multiple_rejects_non_positive_reference():
    with pytest.raises(ValueError):
        minimum_wage_multiple(Decimal("100.00"), Decimal("0"))


def test_minimum_wage_multiples_keep_list_order(employees):
    result = minimum_wage_multiples(employees)
    assert [emp.name for emp, _ in result] == [emp.name for emp in employees]
    assert dict((emp.name, m) for emp, m in result)["Caio"] == Decimal("8.12")


def test_find_oldest_seed(employees):
    oldest = find_oldest(employees)
    assert oldest.name == "Caio"
    assert oldest.birth_date == date(1961, 5, 2)


def test_find_oldest_tie_keeps_first():
    born = date(1970, 1, 1)
    first = Employee("Ana", born, Decimal("1.00"), "Operador")
    second = Employee("Bia", born, Decimal("2.00"), "Operador")
    assert find_oldest([first, second]) is first


def test_find_oldest_empty():
    assert find_oldest([]) is None
    assert oldest_with_age([]) is None


def test_oldest_with_age(employees):
    emp, age = oldest_with_age(employees, today=date(2026, 10, 19))
    assert emp.name == "Caio"
    assert age == 65


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2026, 5, 1), 64),
        (date(2026, 5, 2), 65),
        (date(2026, 12, 31), 65),
        (date(1961, 5, 2), 0),
        (date(2025, 2, 28), 63),
    ],
)
def test_age_counts_complete_years(today, expected):
    assert age_in_years(date(1961, 5, 2), today) == expected


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2025, 2, 28), 24),
        (date(2025, 3, 1), 25),
        (date(2024, 2, 28), 23),
        (date(2024, 2, 29), 24),
    ],
)
def test_age_for_leap_day_birth(today, expected):
    assert age_in_years(date(2000, 2, 29), today) == expected

