from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    sites = container.site_service

    @app.route("/admin/sites", methods=["GET"], endpoint="admin_sites")
    @admin_required
    def admin_sites():
        return jsonify({"success": True, "sites": [s.to_dict() for s in sites.list_all()]})

    @app.route("/admin/sites", methods=["POST"], endpoint="add_site")
    @admin_required
    def add_site():
        data = json_body()
        site = sites.create(name=str(data.get("name", "")), address=str(data.get("address", "")))
        return jsonify({"success": True, "site": site.to_dict()}), 201

    @app.route("/admin/sites/<site_id>", methods=["DELETE"], endpoint="delete_site")
    @admin_required
    def delete_site(site_id: str):
        sites.delete(site_id)
        return jsonify({"success": True})
