from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import (
    digits_only,
    require_non_empty,
    require_non_negative,
    require_time_of_day,
)
from ..core.constants import PHONE_SUFFIX_LENGTH, WEEKDAY_LABELS
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, Schedule
from .repository import EmployeeRepository


def find_by_phone_suffix(employees: Sequence[Employee], suffix: str) -> Optional[Employee]:
    """First active employee whose phone ends with ``suffix`` (roster order breaks ties)."""
    if len(suffix) != PHONE_SUFFIX_LENGTH or not suffix.isdigit():
        return None
    for employee in employees:
        if employee.active and employee.phone_suffix(PHONE_SUFFIX_LENGTH) == suffix:
            return employee
    return None


class EmployeeService:
    """Use case: manage the employee roster (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self) -> list[Employee]:
        return list(self._employees.get_employees())

    def get(self, employee_id: str) -> Employee:
        for employee in self._employees.get_employees():
            if employee.id == employee_id:
                return employee
        raise NotFoundError("Funcionário não encontrado")

    def search(self, term: str) -> list[Employee]:
        term = (term or "").strip().lower()
        employees = self.list_all()
        if not term:
            return employees
        return [e for e in employees if term in e.name.lower() or term in e.role.label.lower()]

    def find_by_phone_suffix(self, suffix: str) -> Optional[Employee]:
        return find_by_phone_suffix(self._employees.get_employees(), suffix)

    @staticmethod
    def new_employee() -> Employee:
        return Employee(
            id=str(uuid.uuid4()),
            name="",
            phone="",
            email="",
            role=Role.WORKER,
            hourly_rate=0.0,
            schedule=Schedule(days=("Seg", "Ter", "Qua", "Qui", "Sex"), start="08:00", end="17:00"),
            photo_url="",
            active=True,
        )

    def save(self, employee: Employee) -> Employee:
        """Insert or replace (by id) after validation."""
        employee = self._validate(employee)
        roster = list(self._employees.get_employees())

        if employee.active:
            suffix = employee.phone_suffix(PHONE_SUFFIX_LENGTH)
            clash = next(
                (e for e in roster if e.id != employee.id and e.active and e.phone_suffix(PHONE_SUFFIX_LENGTH) == suffix),
                None,
            )
            if clash:
                raise ValidationError(f"Os 4 últimos dígitos do telefone já são usados por {clash.name}")

        if any(e.id == employee.id for e in roster):
            roster = [employee if e.id == employee.id else e for e in roster]
        else:
            roster.append(employee)

        self._employees.save_employees(roster)
        return employee

    def delete(self, employee_id: str) -> None:
        roster = list(self._employees.get_employees())
        remaining = [e for e in roster if e.id != employee_id]
        if len(remaining) == len(roster):
            raise NotFoundError("Funcionário não encontrado")
        self._employees.save_employees(remaining)

    def _validate(self, employee: Employee) -> Employee:
        name = require_non_empty(employee.name, "Nome")
        phone = require_non_empty(employee.phone, "Telefone")
        email = require_non_empty(employee.email, "E-mail")
        if len(digits_only(phone)) < PHONE_SUFFIX_LENGTH:
            raise ValidationError(f"Telefone deve ter ao menos {PHONE_SUFFIX_LENGTH} dígitos")

        rate = require_non_negative(employee.hourly_rate, "Valor da hora")
        start = require_time_of_day(employee.schedule.start, "Início do expediente")
        end = require_time_of_day(employee.schedule.end, "Fim do expediente")
        unknown = [d for d in employee.schedule.days if d not in WEEKDAY_LABELS]
        if unknown:
            raise ValidationError(f"Dias inválidos: {', '.join(unknown)}")

        return replace(
            employee,
            name=name,
            phone=phone,
            email=email,
            hourly_rate=rate,
            schedule=Schedule(days=tuple(employee.schedule.days), start=start, end=end),
        )
