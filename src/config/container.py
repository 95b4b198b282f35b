"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

O TicketService não cria seus próprios serviços externos: toda
a ligação com implementações concretas acontece aqui.

Padrões:
- Singleton: Uma instância para toda app (gateways)
- Factory: Nova instância por chamada (services)
- Selector: Implementação escolhida por configuração
"""

from dependency_injector import containers, providers
from typing import Optional

from src.adapters.thirdparty import SeatReservationService, TicketPaymentService
from src.core.tickets.ports import (
    InMemoryPaymentGateway,
    InMemorySeatReservationGateway,
)
from src.core.tickets.use_cases import PurchaseTicketsService, TicketService

from . import settings


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Variáveis de ambiente/settings
    - Gateways: Serviços externos de pagamento e reserva
    - Services: Use Cases

    Example:
        from src.config.container import Container

        container = Container()
        container.config.from_dict({'gateway_mode': 'memory'})

        service = container.ticket_service()
        service.purchase_tickets(1, TicketTypeRequest("ADULT", 2))
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Gateways (Singleton - uma instância por app)
    # =========================================================================

    payment_gateway = providers.Selector(
        config.gateway_mode,
        thirdparty=providers.Singleton(TicketPaymentService),
        memory=providers.Singleton(InMemoryPaymentGateway),
    )

    seat_reservation_gateway = providers.Selector(
        config.gateway_mode,
        thirdparty=providers.Singleton(SeatReservationService),
        memory=providers.Singleton(InMemorySeatReservationGateway),
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    ticket_service = providers.Factory(
        TicketService,
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
    )

    purchase_tickets_service = providers.Factory(
        PurchaseTicketsService,
        ticket_service=ticket_service,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), configurado
    a partir de settings.

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict({
            'gateway_mode': settings.GATEWAY_MODE,
        })

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes com gateways em memória.

    Example:
        container = TestingContainer()
        container.ticket_service().purchase_tickets(1, TicketTypeRequest("ADULT", 1))
        container.payment_gateway().payments  # [(1, 25)]
    """

    config = providers.Configuration()

    payment_gateway = providers.Singleton(InMemoryPaymentGateway)

    seat_reservation_gateway = providers.Singleton(InMemorySeatReservationGateway)

    ticket_service = providers.Factory(
        TicketService,
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
    )

    purchase_tickets_service = providers.Factory(
        PurchaseTicketsService,
        ticket_service=ticket_service,
    )
