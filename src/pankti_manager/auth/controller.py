from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import current_auth, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        container.auth_service.login(str(data.get("pin", "")), current_auth())
        session.permanent = True
        return jsonify({"success": True, "message": "Login successful"})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout(current_auth())
        return jsonify({"success": True, "message": "Logged out successfully"})

    @app.route("/session", endpoint="session_state")
    def session_state():
        return jsonify({"authenticated": current_auth().is_authenticated})
