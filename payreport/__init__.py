"""Employee report package.

Seeds an in-memory employee list and prints the fixed sequence of salary
reports (raise, grouping by role, birthdays, totals, minimum-wage multiples).
"""

__version__ = "1.0.0"
