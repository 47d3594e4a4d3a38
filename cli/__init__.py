"""CLI package for the chronophrase tool."""

import logging
import sys

from chronophrase.config import HumanizeConfig

logger = logging.getLogger(__name__)


def _file_handler(config: HumanizeConfig) -> logging.Handler | None:
    """Open the log file under ``config.log_dir``, or None if it can't be written."""
    if config.log_dir is None:
        return None
    log_path = config.log_dir / config.log_filename
    try:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        logger.warning(f"File logging disabled, cannot write {log_path}: {e}")
        return None
    # File formatter: includes timestamp
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: HumanizeConfig | None = None
) -> None:
    """Configure console logging, plus a debug log file when LOG_DIR is set.

    Args:
        verbose: If True, set console to INFO level
        quiet: If True, set console to ERROR level only
        config: Optional HumanizeConfig for log directory/filename settings
    """
    if config is None:
        config = HumanizeConfig.from_env()

    # Console formatter: no timestamp, just level and message
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    if quiet:
        console_handler.setLevel(logging.ERROR)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        # Default: only show warnings and errors
        console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    file_handler = _file_handler(config)
    if file_handler is not None:
        root_logger.addHandler(file_handler)


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
