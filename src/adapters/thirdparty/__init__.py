"""
Adapters para serviços externos (pagamento e reserva de assentos).
"""

from .payment_gateway import TicketPaymentService
from .seat_booking import SeatReservationService

__all__ = [
    "TicketPaymentService",
    "SeatReservationService",
]
