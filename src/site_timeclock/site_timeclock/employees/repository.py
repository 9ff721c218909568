from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee roster.

    Note (DIP): services depend on this interface; ``RecordStore`` implements it.
    """

    def get_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_employees(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError
