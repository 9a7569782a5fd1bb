"""Command line interface for inspecting preference stores."""

import logging

from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING, verbose: bool = False) -> None:
    """Route log records through rich; verbose mode shows DEBUG output."""
    root_logger = logging.getLogger()
    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    effective = logging.DEBUG if verbose else level
    rich_handler = RichHandler(
        show_path=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    rich_handler.setLevel(effective)

    root_logger.addHandler(rich_handler)
    root_logger.setLevel(effective)
    logging.getLogger("prefkit").setLevel(effective)
    # SQL echo stays off even in verbose mode
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
