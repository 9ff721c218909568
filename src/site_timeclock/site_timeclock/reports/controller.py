from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.http import admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    @app.route("/admin/dashboard", methods=["GET"], endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        include_financials = request.args.get("financials", "0") in {"1", "true", "yes"}
        stats = reports.dashboard(include_financials=include_financials)
        return jsonify({"success": True, "stats": stats.to_dict()})

    @app.route("/admin/payroll", methods=["GET"], endpoint="admin_payroll")
    @admin_required
    def admin_payroll():
        stats = reports.dashboard(include_financials=True)
        lines = reports.payroll()
        return jsonify({"success": True, "stats": stats.to_dict(), "lines": [line.to_dict() for line in lines]})

    @app.route("/admin/payroll/export", methods=["GET"], endpoint="export_payroll")
    @admin_required
    def export_payroll():
        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=["employee_id", "name", "role", "hourly_rate", "hours", "cost"],
        )
        writer.writeheader()
        for line in reports.payroll():
            writer.writerow(line.to_dict())

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=folha_semanal.csv"},
        )
