"""
Water distortion with text.

Moving the pointer over the window leaves a trail of fading ripples that
distort the background image; the text is drawn with a signed distance
field font so it stays sharp at any window size.

Expected assets (see --help for paths):
    - background image
    - SDF font texture and its JSON metrics
    - optional distortion mask (a procedural one is generated otherwise)

Expected keys:
    - ESC: quit
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from ripple.core.application import Application
from ripple.core.logging import configure_logging
from ripple.core.settings import AppSettings, build_arg_parser
from ripple.errors import RippleError

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = AppSettings.from_args(args)
    configure_logging(settings.log_level)

    try:
        Application(settings).run()
    except (RippleError, FileNotFoundError, ValueError) as e:
        logger.error("Startup failed: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
