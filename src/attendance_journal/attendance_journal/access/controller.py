from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/access", methods=["POST"], endpoint="attendance_access")
    def attendance_access():
        data = json_object()
        ok = container.access_gate.verify(
            teacher_id=data.get("teacherId"),
            pair_id=data.get("pairId"),
            access_code=data.get("accessCode"),
        )
        return jsonify({"ok": ok})

    @app.route("/attendance/access/remove", methods=["POST"], endpoint="attendance_access_remove")
    def attendance_access_remove():
        data = json_object()
        ok = container.access_gate.revoke(
            teacher_id=data.get("teacherId"),
            pair_id=data.get("pairId"),
            access_code=data.get("accessCode"),
        )
        return jsonify({"ok": ok})
