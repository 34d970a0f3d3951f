"""
Logging Configuration
Sets up the loggers of the diagram packages.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMESPACES = ("core.diagram_platform", "api.diagram_api", "visualizer_svg")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the loggers of every diagram package namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for namespace in LOGGER_NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)

        # Avoid duplicate output when called more than once
        if logger.hasHandlers():
            for old_handler in logger.handlers:
                old_handler.close()
            logger.handlers.clear()

        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("core.diagram_platform").info("Logging initialized.")
