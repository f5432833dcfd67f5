#!/usr/bin/env python3
import os

from flask import Flask, jsonify, request

from workout_app import workout_bp
from workout_app.database import DatabaseStorage
from workout_app.errors import ConfigurationError
from workout_app.storage import MemoryStorage

# ───────────── Config ─────────────
DEFAULT_CONFIG = {
    "WORKOUT_STORAGE": os.environ.get("WORKOUT_STORAGE", "memory"),
    "DATABASE_URL": os.environ.get("DATABASE_URL"),
    # None: fall back to workout_core.LOG_FILE
    "ACTION_LOG_FILE": None,
}

HOST = os.environ.get("WORKOUT_HOST", "0.0.0.0")
PORT = int(os.environ.get("WORKOUT_PORT", "8000"))


def build_storage(config):
    """Pick the store named by WORKOUT_STORAGE: "memory" or "database"."""
    kind = (config.get("WORKOUT_STORAGE") or "memory").strip().lower()

    if kind == "memory":
        return MemoryStorage()

    if kind == "database":
        url = config.get("DATABASE_URL")
        if not url:
            raise ConfigurationError("DATABASE_URL is required when WORKOUT_STORAGE=database")
        storage = DatabaseStorage(url)
        storage.create_all()
        storage.seed_defaults()
        return storage

    raise ConfigurationError(f"Unknown WORKOUT_STORAGE '{kind}' (expected 'memory' or 'database')")


def create_app(storage=None, config=None):
    app = Flask(__name__)
    app.config.update(DEFAULT_CONFIG)
    if config:
        app.config.update(config)

    app.extensions["workout_storage"] = storage if storage is not None else build_storage(app.config)
    app.register_blueprint(workout_bp, url_prefix="/api")

    @app.errorhandler(404)
    def api_route_not_found(exc):
        if request.path == "/api" or request.path.startswith("/api/"):
            return jsonify({"message": "Not found"}), 404
        return exc

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "storage": type(app.extensions["workout_storage"]).__name__})

    return app


if __name__ == "__main__":
    create_app().run(host=HOST, port=PORT, debug=True)
