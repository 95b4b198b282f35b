"""
Domínio de Ingressos - Compra de Ingressos de Cinema.

Este módulo contém toda a lógica de negócio relacionada à
compra de ingressos, incluindo:
- Entidades (TicketType, TicketTypeRequest, TicketTotals)
- Use Cases (TicketService, PurchaseTicketsService)
- DTOs (Input Data Transfer Objects)
- Ports (Interfaces para pagamento e reserva de assentos)

Características do Domínio:
- Preços fixos por categoria (bebês não pagam)
- Máximo de 25 ingressos por compra
- Crianças e bebês exigem adulto; um bebê por adulto
- Bebês não ocupam assento
"""

from .entities import TicketType, TicketTypeRequest, TicketTotals
from .dtos import PurchaseTicketsInputDTO
from .ports import (
    PaymentGateway,
    SeatReservationGateway,
    InMemoryPaymentGateway,
    InMemorySeatReservationGateway,
)
from .use_cases import TicketService, PurchaseTicketsService

__all__ = [
    # Entities
    "TicketType",
    "TicketTypeRequest",
    "TicketTotals",
    # DTOs
    "PurchaseTicketsInputDTO",
    # Ports
    "PaymentGateway",
    "SeatReservationGateway",
    "InMemoryPaymentGateway",
    "InMemorySeatReservationGateway",
    # Use Cases
    "TicketService",
    "PurchaseTicketsService",
]
