"""Process-wide logging setup.

Called once by the CLI.  Modules log through ``logging.getLogger(__name__)``
and inherit this configuration.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that are noisy below WARNING.
_NOISY_LOGGERS = ("urllib3", "charset_normalizer")


def parse_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str = "WARNING", quiet_third_party: bool = True) -> None:
    numeric_level = parse_level(level)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=numeric_level <= logging.DEBUG,
        rich_tracebacks=numeric_level <= logging.DEBUG,
    )
    handler.setLevel(numeric_level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    if quiet_third_party:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
