"""
Configuration des logs du process (module logging standard).
Niveau lu depuis LOG_LEVEL, appliqué une seule fois au démarrage.
"""
import logging

from payments_ms.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("payments_ms").setLevel(level.upper())
