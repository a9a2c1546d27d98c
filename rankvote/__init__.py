from flask import Flask, jsonify

from rankvote.cli import register_commands
from rankvote.config import Config
from rankvote.extensions import db, login_manager, migrate
from rankvote.models import User
from rankvote.routes import register_routes
from rankvote.services.voting import VotingError


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"ok": False, "error": "Login required."}), 401

    @app.errorhandler(VotingError)
    def handle_voting_error(error):
        return jsonify(error.to_dict()), error.status_code

    register_routes(app)
    register_commands(app)
    return app


__all__ = ["db", "migrate", "create_app"]
