"""Local CLI configuration (current user id)."""

import json
from pathlib import Path

# Config paths
CONFIG_DIR = Path.home() / ".config" / "hike"
CONFIG_FILE = CONFIG_DIR / "config.json"


def get_user_id() -> str | None:
    """Get user_id from config file."""
    if not CONFIG_FILE.exists():
        return None
    try:
        with open(CONFIG_FILE) as f:
            config: dict[str, str] = json.load(f)
            user_id: str | None = config.get("user_id")
            return user_id
    except (json.JSONDecodeError, OSError):
        return None


def set_user_id(user_id: str) -> None:
    """Store user_id in the config file, keeping other keys."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    config: dict[str, str] = {}
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE) as f:
                config = json.load(f)
        except (json.JSONDecodeError, OSError):
            config = {}
    config["user_id"] = user_id
    with open(CONFIG_FILE, "w") as f:
        json.dump(config, f, indent=2)
