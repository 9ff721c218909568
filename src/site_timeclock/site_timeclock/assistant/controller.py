from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/assistant", methods=["POST"], endpoint="admin_assistant")
    @admin_required
    def admin_assistant():
        answer = container.assistant_service.ask(str(json_body().get("question", "")))
        return jsonify({"success": True, "answer": answer})
