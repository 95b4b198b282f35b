"""
Configurações globais do Pytest para Cinema Tickets.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

import pytest
from unittest.mock import Mock


@pytest.fixture
def payment_gateway():
    """Mock do serviço de pagamento."""
    gateway = Mock()
    gateway.make_payment = Mock(return_value=None)
    return gateway


@pytest.fixture
def seat_reservation_gateway():
    """Mock do serviço de reserva de assentos."""
    gateway = Mock()
    gateway.reserve_seat = Mock(return_value=None)
    return gateway


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com container global limpo.
    """
    yield
    from src.config.container import reset_container
    reset_container()
