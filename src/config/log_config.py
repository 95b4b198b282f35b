"""
Aplicação da configuração de logging.

Sem framework web para carregar settings.LOGGING automaticamente,
o ponto de entrada da aplicação chama configure_logging().
"""

import logging.config
from typing import Optional

from . import settings


def configure_logging(config: Optional[dict] = None) -> None:
    """
    Configura logging global via dictConfig.

    Args:
        config: Dicionário dictConfig (default: settings.LOGGING)
    """
    logging.config.dictConfig(config or settings.LOGGING)
