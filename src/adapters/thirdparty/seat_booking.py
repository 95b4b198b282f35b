"""
Seat Booking - Serviço de reserva de assentos de terceiros.

Ponto de integração com o sistema de reservas do cinema.
Implementação real pertence ao provedor.
"""

import logging

logger = logging.getLogger(__name__)


class SeatReservationService:
    """Adapter do serviço de reservas (implementa SeatReservationGateway)."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """
        Reserva assentos para a conta.

        Raises:
            TypeError: Se algum argumento não for inteiro
        """
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise TypeError("account_id must be an integer")

        if isinstance(total_seats_to_allocate, bool) or not isinstance(total_seats_to_allocate, int):
            raise TypeError("total_seats_to_allocate must be an integer")

        logger.info(
            f"[SEATS] conta={account_id} | assentos={total_seats_to_allocate}"
        )
