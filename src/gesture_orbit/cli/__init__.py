#!/usr/bin/env python3

"""The CLI is for trying the gesture control with a webcam."""


from .common import app
from .config_cmd import init_config_cmd, show_config_cmd  # noqa: F401
from .run import run_gestures_cmd  # noqa: F401


def main() -> None:
    """Entry point for the application."""
    app()


if __name__ == "__main__":
    main()
