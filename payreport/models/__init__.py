from .employee import Employee, Person

__all__ = ["Employee", "Person"]
