from __future__ import annotations

import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Set the root logger level and attach a console handler.

    The level is always applied. The handler is only added when the root
    logger has none, so repeated ``create_app`` calls (as in tests) do not
    duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
