import curses
import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import config_paths
from _version import __version__
from app_state import AppState
from key_input import InputReadError
from keymap import Keymap
from log_setup import setup_logging
from orchestrator import Orchestrator
from renderer import init_styles


logger = logging.getLogger(__name__)

USAGE = "tempchat - tabbed terminal chat shell\n\nUsage:\n  tempchat\n  tempchat -v\n"


def build_state(cfg):
    return AppState(keymap=Keymap(cfg.get("KEYMAP")))


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args:
        print(USAGE)
        return 0

    cfg = config_paths.load_config()
    try:
        config_paths.ensure_config_dirs()
        setup_logging(config_paths.LOG_PATH, cfg["LOG_LEVEL"])
    except OSError as e:
        print(f"Logging disabled: {e}", file=sys.stderr)
    for warning in cfg["WARNINGS"]:
        logger.warning("config: %s", warning)

    state = build_state(cfg)

    def curses_main(stdscr):
        Orchestrator(stdscr, state, init_styles()).run()

    try:
        curses.wrapper(curses_main)
    except InputReadError as e:
        logger.error("input failed: %s", e)
        print(f"Input error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
