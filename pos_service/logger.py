# logger.py
"""Configuración de logging del servicio."""
import logging
import sys

from pos_service.config import SERVICE_NAME, LOG_LEVEL


def setup_logging(level=LOG_LEVEL) -> logging.Logger:
    """
    Configura el logger raíz del servicio. Es idempotente: si ya tiene
    handlers solo actualiza el nivel.
    """
    log = logging.getLogger(SERVICE_NAME)
    log.setLevel(level)
    if log.handlers:
        return log

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    log.addHandler(handler)
    return log


def get_logger(name: str) -> logging.Logger:
    """Logger hijo del logger del servicio (p. ej. pos-service.sales)."""
    return logging.getLogger(SERVICE_NAME).getChild(name)
