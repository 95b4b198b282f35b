"""
Data Transfer Objects (DTOs) do Domínio de Ingressos.

DTOs são estruturas simples para transportar dados entre camadas,
evitando que adapters montem entidades de domínio manualmente.

Tipos de DTOs:
- Input DTOs: Recebem dados de entrada (dicionários de adapters)
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

from src.core.shared.exceptions import InvalidPurchaseException

from .entities import TicketTypeRequest


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class PurchaseTicketsInputDTO:
    """
    DTO de entrada para compra de ingressos.

    Imutável (frozen=True) para garantir que dados
    recebidos não sejam alterados acidentalmente.

    Attributes:
        account_id: ID da conta que está comprando
        ticket_type_requests: Solicitações por categoria, na ordem recebida
    """

    account_id: Any
    ticket_type_requests: Tuple[TicketTypeRequest, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PurchaseTicketsInputDTO":
        """
        Cria DTO a partir de dados simples.

        Formato esperado:
            {
                "account_id": 1,
                "tickets": [
                    {"type": "ADULT", "quantity": 2},
                    {"type": "INFANT", "quantity": 1},
                ]
            }

        A validade da conta não é verificada aqui; isso cabe
        ao TicketService, na ordem definida pelas regras de compra.

        Raises:
            InvalidPurchaseException: Se estrutura malformada ou
                categoria/quantidade inválidas
        """
        if not isinstance(data, Mapping) or "account_id" not in data:
            raise InvalidPurchaseException(
                "Invalid ticket type request",
                rule="invalid_ticket_type_request"
            )

        tickets = data.get("tickets", [])
        if not isinstance(tickets, (list, tuple)):
            raise InvalidPurchaseException(
                "Invalid ticket type request",
                rule="invalid_ticket_type_request"
            )

        requests = []
        for item in tickets:
            if (
                not isinstance(item, Mapping)
                or "type" not in item
                or "quantity" not in item
            ):
                raise InvalidPurchaseException(
                    "Invalid ticket type request",
                    rule="invalid_ticket_type_request"
                )
            requests.append(TicketTypeRequest(item["type"], item["quantity"]))

        return cls(
            account_id=data["account_id"],
            ticket_type_requests=tuple(requests),
        )

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "account_id": self.account_id,
            "tickets": [
                {
                    "type": request.get_ticket_type().name,
                    "quantity": request.get_no_of_tickets(),
                }
                for request in self.ticket_type_requests
            ],
        }
