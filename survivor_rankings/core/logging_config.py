"""
Configuración de logging para toda la app
"""

import logging

from survivor_rankings.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configura el logger raíz una sola vez (DEBUG si debug=True)"""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # Motor/pymongo son muy verbosos en DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
