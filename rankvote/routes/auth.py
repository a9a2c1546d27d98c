from flask import current_app, jsonify
from flask_login import login_required, login_user, logout_user

from rankvote.extensions import db
from rankvote.models import User
from rankvote.routes.forms import bad_request, request_data, text_field
from rankvote.services.security import hash_password, verify_password


def register_auth_routes(app):
    @app.route("/signup", methods=["POST"])
    def signup():
        data = request_data()
        if data is None:
            return bad_request("Request body must be a JSON object.")

        username = text_field(data, "username")
        email = text_field(data, "email")
        password = data.get("password")
        if not isinstance(password, str):
            password = ""

        if not username or not email or not password:
            return {"ok": False, "error": "Username, email and password are required."}, 400

        if len(password) < 8:
            return {"ok": False, "error": "Password must be at least 8 characters long."}, 400

        new_user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
        )

        try:
            db.session.add(new_user)
            db.session.commit()
        except Exception:
            db.session.rollback()
            current_app.logger.exception("Could not register admin %s", username)
            return {"ok": False, "error": "Database error: Could not register user."}, 409

        return {"ok": True, "user": {"id": new_user.id, "username": new_user.username}}, 201

    @app.route("/login", methods=["POST"])
    def login():
        data = request_data()
        if data is None:
            return bad_request("Request body must be a JSON object.")

        username = data.get("username")
        password = data.get("password")
        if not isinstance(password, str):
            password = ""

        user = User.query.filter_by(username=username).first()
        if user is None or not verify_password(user, password):
            return {"ok": False, "error": "Invalid username or password."}, 401

        login_user(user)
        return jsonify({"ok": True})

    @app.route("/logout")
    @login_required
    def logout():
        logout_user()
        return jsonify({"ok": True})
