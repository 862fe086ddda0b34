import pytest

from payreport.providers import SeedEmployeeProvider
from payreport.services.employee_loader import load_employees


@pytest.fixture
def employees():
    return load_employees(SeedEmployeeProvider())
