from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/settings", methods=["GET"], endpoint="admin_settings")
    @admin_required
    def admin_settings():
        return jsonify({"success": True, "settings": container.settings_service.get().to_dict()})

    @app.route("/admin/settings", methods=["PUT"], endpoint="update_settings")
    @admin_required
    def update_settings():
        saved = container.settings_service.update_webhook_url(json_body().get("webhook_url"))
        return jsonify({"success": True, "settings": saved.to_dict()})
