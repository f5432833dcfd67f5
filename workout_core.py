import os
import json
from datetime import datetime

from flask import current_app, has_request_context, request

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_FILE = os.environ.get("WORKOUT_LOG_FILE", os.path.join(BASE_DIR, "logs.jsonl"))


def log_action(action, details=None):
    """Append a single log entry to the action log (JSON Lines)."""
    entry = {
        "timestamp": datetime.now().strftime("%d/%m/%Y %H:%M"),
        "action": action,
        "ip": None,
        "path": None,
        "details": details or {},
        "user_agent": "",
    }
    log_file = LOG_FILE
    if has_request_context():
        entry["ip"] = request.remote_addr
        entry["path"] = request.path
        entry["user_agent"] = request.headers.get("User-Agent", "")
        log_file = current_app.config.get("ACTION_LOG_FILE") or LOG_FILE

    try:
        with open(log_file, "a") as f:
            f.write(json.dumps(entry) + "\n")
    except OSError:
        # Don't break the app if logging fails
        pass
