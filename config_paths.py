import json
import os

from keymap import ACTIONS, DEFAULT_BINDINGS

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tempchat")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "tempchat.log")

LOG_LEVEL_ENV = "TEMPCHAT_LOG_LEVEL"

# default settings
LOG_LEVEL_DEFAULT = "WARNING"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _parse_keys(raw, warnings):
    keymap = {}
    if not isinstance(raw, dict):
        warnings.append("'keys' must be an object; using default key bindings")
        return keymap
    for action, keys in raw.items():
        if action not in ACTIONS:
            warnings.append(f"ignoring unknown action in 'keys': {action!r}")
            continue
        if not (isinstance(keys, list) and keys and all(isinstance(k, str) and k for k in keys)):
            warnings.append(f"ignoring bindings for {action!r}: expected a list of key names")
            continue
        keymap[action] = list(keys)
    return keymap


def _parse_level(raw, warnings):
    if not isinstance(raw, str) or raw.strip().upper() not in LOG_LEVELS:
        warnings.append(f"ignoring invalid log level: {raw!r}")
        return None
    return raw.strip().upper()


def load_config():
    cfg = {
        "KEYMAP": {action: list(keys) for action, keys in DEFAULT_BINDINGS.items()},
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "WARNINGS": [],
    }
    warnings = cfg["WARNINGS"]

    if os.path.exists(CONFIG_JSON):
        data = None
        try:
            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            warnings.append(f"could not read {CONFIG_JSON}: {e}")

        if data is not None and not isinstance(data, dict):
            warnings.append(f"{CONFIG_JSON} must contain a JSON object")
        elif isinstance(data, dict):
            if "keys" in data:
                cfg["KEYMAP"].update(_parse_keys(data["keys"], warnings))
            if "log_level" in data:
                level = _parse_level(data["log_level"], warnings)
                if level:
                    cfg["LOG_LEVEL"] = level

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        level = _parse_level(env_level, warnings)
        if level:
            cfg["LOG_LEVEL"] = level

    return cfg
