from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_object()
        result = container.auth_service.login(data.get("email"), data.get("password"))
        return jsonify(result.to_dict())

    @app.route("/register", methods=["POST"], endpoint="register")
    def register_user():
        data = json_object()
        user = container.auth_service.register(data.get("email"), data.get("password"))
        return jsonify({"user": {"id": user.user_id, "email": user.email}})
