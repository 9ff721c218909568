from __future__ import annotations

import binascii

from flask import Flask, jsonify, session

from ..common.http import ADMIN_SESSION_KEY, json_body
from ..core.exceptions import ValidationError
from ..container import Container
from .snapshot import decode_data_url


def register(app: Flask, container: Container) -> None:
    kiosk = container.punch_session

    def _state_response(view, status: int = 200):
        sites = [s.to_dict() for s in container.site_service.list_active()]
        return jsonify({"success": True, "session": view.to_dict(), "sites": sites}), status

    @app.route("/kiosk/state", methods=["GET"], endpoint="kiosk_state")
    def kiosk_state():
        return _state_response(kiosk.view())

    @app.route("/kiosk/digit", methods=["POST"], endpoint="kiosk_digit")
    def kiosk_digit():
        digit = str(json_body().get("digit", ""))
        return _state_response(kiosk.press_digit(digit))

    @app.route("/kiosk/clear", methods=["POST"], endpoint="kiosk_clear")
    def kiosk_clear():
        return _state_response(kiosk.clear())

    @app.route("/kiosk/site", methods=["POST"], endpoint="kiosk_site")
    def kiosk_site():
        return _state_response(kiosk.select_site(str(json_body().get("site_id", ""))))

    @app.route("/kiosk/confirm", methods=["POST"], endpoint="kiosk_confirm")
    def kiosk_confirm():
        snapshot = json_body().get("snapshot")
        frame = None
        if snapshot:
            try:
                frame = decode_data_url(str(snapshot))
            except (binascii.Error, ValueError):
                raise ValidationError("Imagem da câmera inválida")

        result = kiosk.confirm(frame=frame)
        return jsonify(
            {
                "success": True,
                "punch": {
                    "id": result.log.id,
                    "type": result.log.type.value,
                    "label": result.log.type.label,
                    "employee": result.employee.name,
                    "site": result.site.name,
                },
                "session": kiosk.view().to_dict(),
            }
        ), 201

    @app.route("/kiosk/cancel", methods=["POST"], endpoint="kiosk_cancel")
    def kiosk_cancel():
        return _state_response(kiosk.cancel())

    @app.route("/kiosk/admin-login", methods=["POST"], endpoint="kiosk_admin_login")
    def kiosk_admin_login():
        kiosk.admin_login(str(json_body().get("pin", "")))
        session[ADMIN_SESSION_KEY] = True
        return jsonify({"success": True})

    @app.route("/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.pop(ADMIN_SESSION_KEY, None)
        return jsonify({"success": True})
