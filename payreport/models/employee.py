# payreport/models/employee.py
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from payreport.logic.formatting import format_date, format_money, quantize_money


# Égalité = identité de l'objet; comparer les noms avec has_name()
@dataclass(eq=False)
class Person:
    name: str
    birth_date: date

    def has_name(self, name: str) -> bool:
        """Comparaison de nom insensible à la casse."""
        return self.name.casefold() == name.casefold()


@dataclass(eq=False)
class Employee(Person):
    salary: Decimal
    role: str

    def __post_init__(self):
        self.salary = self._checked_salary(self.salary)

    def update_salary(self, salary: Decimal) -> None:
        self.salary = self._checked_salary(salary)

    @staticmethod
    def _checked_salary(salary) -> Decimal:
        if isinstance(salary, float):
            raise TypeError("salary must be a Decimal, not float")
        amount = quantize_money(salary)
        if amount < 0:
            raise ValueError(f"salary cannot be negative: {amount}")
        return amount

    def __str__(self) -> str:
        return (
            f"Name: {self.name} | Birth date: {format_date(self.birth_date)} | "
            f"Salary: R$ {format_money(self.salary)} | Role: {self.role}"
        )
