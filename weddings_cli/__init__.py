"""CLI package for the wedding invite tools."""

import logging
import sys
from pathlib import Path

from weddings.config import WeddingsConfig

# Third-party loggers that are chatty at INFO: requests' pool and the dev server
NOISY_LOGGERS = ("urllib3", "werkzeug")


def console_level(verbose: bool = False, quiet: bool = False) -> int:
    """Console threshold: ERROR when quiet, INFO when verbose, else WARNING."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: WeddingsConfig | None = None
) -> Path:
    """Log everything to ``{log_dir}/{log_filename}`` and warnings to stderr.

    Args:
        verbose: If True, also show info messages (calendar writes, unlocks)
        quiet: If True, show errors only; wins over verbose
        config: Optional WeddingsConfig for log directory/filename settings

    Returns:
        Path of the log file
    """
    if config is None:
        config = WeddingsConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = config.log_dir / config.log_filename

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    console_handler.setLevel(console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO if verbose else logging.WARNING)

    return log_path


def main() -> None:
    """Main entry point for the CLI."""
    from weddings_cli.parser import app

    app()


__all__ = ["console_level", "main", "setup_logging"]
