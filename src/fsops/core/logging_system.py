"""Logging setup for FS Operations.

Logging is configured from a YAML dictConfig document. The packaged
config/logging.yaml is used when no path is given.

Typical usage:
    from fsops.core.logging_system import get_logger, initialize_logging

    initialize_logging()
    logger = get_logger(__name__)
    logger.info("Ready")
"""

import logging
import logging.config
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "logging.yaml"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Args:
        name: Logger name, normally the module's __name__.

    Returns:
        Standard library logger.
    """
    return logging.getLogger(name)


def initialize_logging(
    config_path: str | Path | None = None,
    level: str | None = None,
) -> None:
    """Configure logging from a YAML file.

    Falls back to basicConfig when the file is missing or invalid, so the
    bot always starts with some logging in place.

    Args:
        config_path: Path to a YAML dictConfig file. Defaults to the
            packaged config/logging.yaml.
        level: Optional level override for the root and fsops loggers.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    try:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
        logging.config.dictConfig(config)
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        logging.basicConfig(level=logging.INFO, format=DEFAULT_FORMAT)
        logging.getLogger(__name__).warning(
            "Could not load logging config %s (%s), using defaults", path, e
        )

    if level:
        logging.getLogger().setLevel(level.upper())
        logging.getLogger("fsops").setLevel(level.upper())
