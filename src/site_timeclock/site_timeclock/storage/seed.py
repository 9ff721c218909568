"""Dataset returned on first run, before anything has been saved."""

from __future__ import annotations

from ..core.enums import Role
from ..employees.model import Employee, Schedule
from ..sites.model import Site

SEED_EMPLOYEES: tuple[Employee, ...] = (
    Employee(
        id="1",
        name="Carlos Silva",
        phone="11999991234",
        email="carlos@obra.com",
        role=Role.FOREMAN,
        hourly_rate=35.0,
        schedule=Schedule(days=("Seg", "Ter", "Qua", "Qui", "Sex"), start="07:00", end="16:00"),
        active=True,
    ),
    Employee(
        id="2",
        name="Ana Souza",
        phone="11988885678",
        email="ana@obra.com",
        role=Role.ENGINEER,
        hourly_rate=85.0,
        schedule=Schedule(days=("Seg", "Qua", "Sex"), start="09:00", end="17:00"),
        active=True,
    ),
)

SEED_SITES: tuple[Site, ...] = (
    Site(id="1", name="Residencial Parque Verde", address="Rua das Flores, 123", active=True),
    Site(id="2", name="Reforma Shopping Centro", address="Av. Central, 500", active=True),
)
