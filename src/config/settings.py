"""
Settings do Cinema Tickets.

Usa variáveis de ambiente para configurações de infraestrutura.
Regras de negócio (preços, limite de ingressos) NÃO ficam aqui:
são constantes do domínio em src/core/tickets/constants.py.
"""

import os
from dotenv import load_dotenv

# Carregar variáveis de ambiente
load_dotenv()

# =============================================================================
# Serviços Externos
# =============================================================================

# Gateway mode
# 'thirdparty' = TicketPaymentService / SeatReservationService
# 'memory' = InMemory gateways (desenvolvimento/testes)
GATEWAY_MODE = os.getenv('GATEWAY_MODE', 'thirdparty')

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'src.core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.adapters': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
