from __future__ import annotations

from dataclasses import replace

from flask import Flask, jsonify, request

from ..common.http import admin_required, json_body
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container
from .model import Employee, Schedule


def _apply_form(base: Employee, data: dict) -> Employee:
    try:
        role = Role(data.get("role", base.role.value))
    except ValueError:
        raise ValidationError("Função inválida")

    active = data.get("active", base.active)
    if not isinstance(active, bool):
        raise ValidationError("Ativo deve ser true ou false")

    schedule_data = data.get("schedule") or {}
    schedule = Schedule(
        days=tuple(schedule_data.get("days", base.schedule.days)),
        start=str(schedule_data.get("start", base.schedule.start)),
        end=str(schedule_data.get("end", base.schedule.end)),
    )
    return replace(
        base,
        name=str(data.get("name", base.name)),
        phone=str(data.get("phone", base.phone)),
        email=str(data.get("email", base.email)),
        role=role,
        hourly_rate=data.get("hourly_rate", base.hourly_rate),
        schedule=schedule,
        photo_url=data.get("photo_url", base.photo_url),
        active=active,
    )


def register(app: Flask, container: Container) -> None:
    employees = container.employee_service

    @app.route("/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    def admin_employees():
        found = employees.search(request.args.get("q", ""))
        return jsonify({"success": True, "employees": [e.to_dict() for e in found]})

    @app.route("/admin/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    def add_employee():
        saved = employees.save(_apply_form(employees.new_employee(), json_body()))
        return jsonify({"success": True, "employee": saved.to_dict()}), 201

    @app.route("/admin/employees/<employee_id>", methods=["PUT"], endpoint="edit_employee")
    @admin_required
    def edit_employee(employee_id: str):
        saved = employees.save(_apply_form(employees.get(employee_id), json_body()))
        return jsonify({"success": True, "employee": saved.to_dict()})

    @app.route("/admin/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: str):
        employees.delete(employee_id)
        return jsonify({"success": True})
