"""
Use Cases (Application Services) do Domínio de Ingressos.

Este módulo contém os casos de uso da aplicação, que validam o
pedido, calculam valores e coordenam os serviços externos.

Use Cases implementados:
- TicketService: Valida, precifica e processa uma compra
- PurchaseTicketsService: Executa a compra a partir de um DTO

Responsabilidades dos Use Cases:
- Validar entrada (regras de compra)
- Calcular valor e assentos
- Invocar pagamento e reserva apenas após validação completa

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI), sem implementações default
- Sem lógica de infraestrutura
- Sem estado compartilhado entre chamadas
"""

import logging

from src.core.shared.exceptions import InvalidPurchaseException

from .constants import MAX_TICKETS_PER_PURCHASE
from .dtos import PurchaseTicketsInputDTO
from .entities import TicketTotals, TicketType, TicketTypeRequest
from .ports import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class TicketService:
    """
    Use Case: Comprar ingressos.

    Fluxo (fail-fast, a primeira violação encerra a compra):
    1. Rejeitar pedido vazio
    2. Validar ID da conta
    3. Validar cada solicitação e sua categoria
    4. Agregar totais por categoria
    5. Validar totais (limite, adulto presente, bebês por adulto)
    6. Cobrar pagamento
    7. Reservar assentos

    Nenhum serviço externo é chamado se alguma regra for violada.
    Erros dos serviços externos são propagados sem tratamento.

    Attributes:
        payment_gateway: Serviço de pagamento
        seat_reservation_gateway: Serviço de reserva de assentos

    Example:
        service = TicketService(payment_gateway, seat_reservation_gateway)
        service.purchase_tickets(
            1,
            TicketTypeRequest("ADULT", 2),
            TicketTypeRequest("CHILD", 1),
        )
        # make_payment(1, 65) e reserve_seat(1, 3)
    """

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
    ):
        """
        Inicializa service com dependências injetadas.

        Args:
            payment_gateway: Implementação de PaymentGateway
            seat_reservation_gateway: Implementação de SeatReservationGateway

        Raises:
            TypeError: Se alguma dependência não cumpre o contrato
        """
        if not callable(getattr(payment_gateway, "make_payment", None)):
            raise TypeError("payment_gateway must implement make_payment()")
        if not callable(getattr(seat_reservation_gateway, "reserve_seat", None)):
            raise TypeError("seat_reservation_gateway must implement reserve_seat()")

        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway

    def purchase_tickets(self, account_id: int, *ticket_type_requests: TicketTypeRequest) -> None:
        """
        Executa compra de ingressos.

        Args:
            account_id: ID da conta (inteiro positivo)
            *ticket_type_requests: Solicitações por categoria

        Raises:
            InvalidPurchaseException: Se qualquer regra de compra for violada
        """
        if len(ticket_type_requests) == 0:
            raise InvalidPurchaseException(
                "No tickets requested",
                rule="no_tickets_requested"
            )

        self._validar_conta(account_id)
        self._validar_solicitacoes(ticket_type_requests)

        totals = TicketTotals.from_requests(ticket_type_requests)
        logger.debug(f"Totais calculados para conta {account_id}: {totals.to_dict()}")

        self._validar_totais(totals)

        total_amount = totals.total_amount
        total_seats = totals.total_seats

        self._payment_gateway.make_payment(account_id, total_amount)
        self._seat_reservation_gateway.reserve_seat(account_id, total_seats)

        logger.info(
            f"Compra concluída | conta={account_id} | "
            f"valor={total_amount} | assentos={total_seats}"
        )

    def _validar_conta(self, account_id) -> None:
        """Conta deve ser inteiro positivo (bool não é aceito)."""
        if (
            isinstance(account_id, bool)
            or not isinstance(account_id, int)
            or account_id <= 0
        ):
            raise InvalidPurchaseException(
                f"Invalid account ID: {account_id}",
                rule="invalid_account_id"
            )

    def _validar_solicitacoes(self, ticket_type_requests) -> None:
        """Cada item deve ser TicketTypeRequest com categoria conhecida."""
        for request in ticket_type_requests:
            if not isinstance(request, TicketTypeRequest):
                raise InvalidPurchaseException(
                    "Invalid ticket type request",
                    rule="invalid_ticket_type_request"
                )

            if not isinstance(request.get_ticket_type(), TicketType):
                raise InvalidPurchaseException(
                    "Unknown ticket type",
                    rule="unknown_ticket_type"
                )

    def _validar_totais(self, totals: TicketTotals) -> None:
        """
        Valida regras sobre o pedido agregado.

        Regras:
        - Pelo menos um ingresso
        - No máximo MAX_TICKETS_PER_PURCHASE ingressos
        - Crianças e bebês exigem pelo menos um adulto
        - No máximo um bebê por adulto

        Raises:
            InvalidPurchaseException: Na primeira regra violada
        """
        if totals.total_tickets == 0:
            raise InvalidPurchaseException(
                "No tickets requested",
                rule="no_tickets_requested"
            )

        if totals.total_tickets > MAX_TICKETS_PER_PURCHASE:
            raise InvalidPurchaseException(
                f"Cannot purchase more than {MAX_TICKETS_PER_PURCHASE} tickets at a time",
                rule="max_tickets_exceeded"
            )

        if totals.total_adult_tickets == 0 and (
            totals.total_child_tickets > 0 or totals.total_infant_tickets > 0
        ):
            raise InvalidPurchaseException(
                "Child or Infant tickets cannot be purchased without at least one Adult ticket",
                rule="adult_required"
            )

        if totals.total_infant_tickets > totals.total_adult_tickets:
            raise InvalidPurchaseException(
                "Each infant must be accompanied by an adult. Too many infants.",
                rule="too_many_infants"
            )


class PurchaseTicketsService:
    """
    Use Case: Comprar ingressos a partir de um DTO.

    Usado por adapters que recebem dados simples. Delega toda a
    validação ao TicketService e, em caso de sucesso, retorna os
    totais do pedido.

    Example:
        service = PurchaseTicketsService(ticket_service)
        input_dto = PurchaseTicketsInputDTO.from_dict({
            "account_id": 1,
            "tickets": [{"type": "ADULT", "quantity": 3}],
        })
        totals = service.execute(input_dto)
        totals.total_amount  # 75
    """

    def __init__(self, ticket_service: TicketService):
        self.ticket_service = ticket_service

    def execute(self, input_dto: PurchaseTicketsInputDTO) -> TicketTotals:
        """
        Executa compra.

        Args:
            input_dto: Dados da compra

        Returns:
            Totais do pedido processado

        Raises:
            InvalidPurchaseException: Se compra inválida
        """
        self.ticket_service.purchase_tickets(
            input_dto.account_id,
            *input_dto.ticket_type_requests,
        )

        return TicketTotals.from_requests(input_dto.ticket_type_requests)
