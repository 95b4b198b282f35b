"""
Entidades do Domínio de Ingressos.

Este módulo define os objetos de domínio que encapsulam
regras de negócio relacionadas à compra de ingressos de cinema.

Entidades:
- TicketType: Categorias de ingresso (ADULT, CHILD, INFANT)
- TicketTypeRequest: Linha do pedido (categoria + quantidade)
- TicketTotals: Agregado de contagens calculado por compra

Regras de Negócio Encapsuladas:
- Categoria sempre pertence à enumeração fechada
- Quantidade de ingressos é um inteiro positivo
- Preço e ocupação de assento derivados da categoria
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from src.core.shared.exceptions import InvalidPurchaseException

from .constants import TICKET_PRICES


class TicketType(Enum):
    """
    Categorias de ingresso.

    Preço e Assento por Categoria:
        ADULT: 25, ocupa assento
        CHILD: 15, ocupa assento
        INFANT: 0, vai no colo de um adulto (não ocupa assento)
    """

    ADULT = "Adulto"
    CHILD = "Criança"
    INFANT = "Bebê"

    @property
    def preco(self) -> int:
        """Retorna preço unitário desta categoria."""
        return TICKET_PRICES[self.name]

    @property
    def ocupa_assento(self) -> bool:
        """Bebês não ocupam assento."""
        return self is not TicketType.INFANT

    @classmethod
    def from_string(cls, value: str) -> "TicketType":
        """
        Converte string para enum.

        Args:
            value: Valor string (nome ou valor do enum)

        Returns:
            TicketType correspondente

        Raises:
            InvalidPurchaseException: Se categoria desconhecida
        """
        if isinstance(value, str):
            # Tenta pelo nome (ADULT)
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass

            # Tenta pelo valor ("Adulto")
            for ticket_type in cls:
                if ticket_type.value.lower() == value.strip().lower():
                    return ticket_type

        raise InvalidPurchaseException(
            "Unknown ticket type",
            rule="unknown_ticket_type"
        )


@dataclass(frozen=True)
class TicketTypeRequest:
    """
    Solicitação de ingressos de uma categoria.

    Imutável (frozen=True): criada uma vez por linha do pedido
    e nunca alterada.

    Invariantes:
    - ticket_type é sempre um membro de TicketType
    - no_of_tickets é inteiro maior que zero

    Attributes:
        ticket_type: Categoria (aceita TicketType ou seu nome, ex: "ADULT")
        no_of_tickets: Quantidade de ingressos

    Example:
        request = TicketTypeRequest("ADULT", 2)
        request.get_ticket_type()      # TicketType.ADULT
        request.get_no_of_tickets()    # 2
    """

    ticket_type: Union[TicketType, str]
    no_of_tickets: int

    def __post_init__(self):
        """Normaliza categoria e valida quantidade."""
        if not isinstance(self.ticket_type, TicketType):
            object.__setattr__(
                self, "ticket_type", TicketType.from_string(self.ticket_type)
            )

        # bool é subclasse de int
        if (
            isinstance(self.no_of_tickets, bool)
            or not isinstance(self.no_of_tickets, int)
            or self.no_of_tickets <= 0
        ):
            raise InvalidPurchaseException(
                f"Number of tickets must be a positive integer: {self.no_of_tickets!r}",
                rule="invalid_ticket_quantity"
            )

    def get_ticket_type(self) -> TicketType:
        return self.ticket_type

    def get_no_of_tickets(self) -> int:
        return self.no_of_tickets


@dataclass(frozen=True)
class TicketTotals:
    """
    Totais de ingressos de uma compra.

    Calculado do zero a cada chamada de compra e descartado
    em seguida. Nunca compartilhado entre chamadas.

    Attributes:
        total_tickets: Soma de todas as quantidades
        total_adult_tickets: Ingressos de adulto
        total_child_tickets: Ingressos de criança
        total_infant_tickets: Ingressos de bebê
    """

    total_tickets: int = 0
    total_adult_tickets: int = 0
    total_child_tickets: int = 0
    total_infant_tickets: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> "TicketTotals":
        """
        Agrega quantidades por categoria.

        Args:
            requests: Solicitações já validadas

        Returns:
            Nova instância com as contagens do pedido
        """
        por_categoria = {ticket_type: 0 for ticket_type in TicketType}

        for request in requests:
            por_categoria[request.get_ticket_type()] += request.get_no_of_tickets()

        return cls(
            total_tickets=sum(por_categoria.values()),
            total_adult_tickets=por_categoria[TicketType.ADULT],
            total_child_tickets=por_categoria[TicketType.CHILD],
            total_infant_tickets=por_categoria[TicketType.INFANT],
        )

    @property
    def total_amount(self) -> int:
        """Valor a pagar. Bebês não pagam."""
        return (
            self.total_adult_tickets * TicketType.ADULT.preco
            + self.total_child_tickets * TicketType.CHILD.preco
        )

    @property
    def total_seats(self) -> int:
        """Assentos a reservar. Apenas categorias que ocupam assento contam."""
        por_categoria = {
            TicketType.ADULT: self.total_adult_tickets,
            TicketType.CHILD: self.total_child_tickets,
            TicketType.INFANT: self.total_infant_tickets,
        }
        return sum(
            quantidade
            for ticket_type, quantidade in por_categoria.items()
            if ticket_type.ocupa_assento
        )

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "total_tickets": self.total_tickets,
            "total_adult_tickets": self.total_adult_tickets,
            "total_child_tickets": self.total_child_tickets,
            "total_infant_tickets": self.total_infant_tickets,
            "total_amount": self.total_amount,
            "total_seats": self.total_seats,
        }
