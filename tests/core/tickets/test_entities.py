"""
Testes Unitários para Entidades do Domínio de Ingressos.

Coverage:
- TicketType: preços, ocupação de assento, conversão de string
- TicketTypeRequest: validação de categoria e quantidade, imutabilidade
- TicketTotals: agregação, valor e assentos
"""

import dataclasses

import pytest

from src.core.tickets.entities import (
    TicketType,
    TicketTypeRequest,
    TicketTotals,
)
from src.core.shared.exceptions import InvalidPurchaseException


class TestTicketType:
    """Testes para TicketType."""

    def test_precos_por_categoria(self):
        assert TicketType.ADULT.preco == 25
        assert TicketType.CHILD.preco == 15
        assert TicketType.INFANT.preco == 0

    def test_bebe_nao_ocupa_assento(self):
        assert TicketType.ADULT.ocupa_assento is True
        assert TicketType.CHILD.ocupa_assento is True
        assert TicketType.INFANT.ocupa_assento is False

    @pytest.mark.parametrize("value,expected", [
        ("ADULT", TicketType.ADULT),
        ("child", TicketType.CHILD),
        (" Infant ", TicketType.INFANT),
        ("Adulto", TicketType.ADULT),
        ("bebê", TicketType.INFANT),
    ])
    def test_from_string_por_nome_ou_valor(self, value, expected):
        assert TicketType.from_string(value) is expected

    @pytest.mark.parametrize("value", ["HUMAN", "", None, 1])
    def test_from_string_categoria_desconhecida(self, value):
        with pytest.raises(InvalidPurchaseException) as exc_info:
            TicketType.from_string(value)

        assert exc_info.value.rule == "unknown_ticket_type"
        assert exc_info.value.message == "Unknown ticket type"


class TestTicketTypeRequest:
    """Testes para TicketTypeRequest."""

    def test_criar_com_enum(self):
        request = TicketTypeRequest(TicketType.ADULT, 2)

        assert request.get_ticket_type() is TicketType.ADULT
        assert request.get_no_of_tickets() == 2

    def test_criar_com_string_normaliza_para_enum(self):
        request = TicketTypeRequest("CHILD", 1)

        assert request.ticket_type is TicketType.CHILD

    def test_categoria_desconhecida_usa_erro_de_compra(self):
        """Categoria desconhecida não gera TypeError, e sim erro de compra."""
        with pytest.raises(InvalidPurchaseException) as exc_info:
            TicketTypeRequest("HUMAN", 1)

        assert exc_info.value.rule == "unknown_ticket_type"

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", None, True])
    def test_quantidade_invalida(self, quantity):
        with pytest.raises(InvalidPurchaseException) as exc_info:
            TicketTypeRequest("ADULT", quantity)

        assert exc_info.value.rule == "invalid_ticket_quantity"

    def test_imutavel(self):
        request = TicketTypeRequest("ADULT", 1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.no_of_tickets = 5

    def test_igualdade_por_valor(self):
        assert TicketTypeRequest("ADULT", 1) == TicketTypeRequest(TicketType.ADULT, 1)


class TestTicketTotals:
    """Testes para TicketTotals."""

    def test_agrega_por_categoria(self):
        totals = TicketTotals.from_requests([
            TicketTypeRequest("ADULT", 2),
            TicketTypeRequest("CHILD", 1),
            TicketTypeRequest("INFANT", 1),
            TicketTypeRequest("ADULT", 1),
        ])

        assert totals.total_tickets == 5
        assert totals.total_adult_tickets == 3
        assert totals.total_child_tickets == 1
        assert totals.total_infant_tickets == 1

    def test_valor_e_assentos_ignoram_bebes(self):
        totals = TicketTotals.from_requests([
            TicketTypeRequest("ADULT", 2),
            TicketTypeRequest("CHILD", 1),
            TicketTypeRequest("INFANT", 2),
        ])

        assert totals.total_amount == 65
        assert totals.total_seats == 3

    def test_assentos_seguem_ocupacao_da_categoria(self, monkeypatch):
        """Assentos somam só categorias que ocupam assento."""
        monkeypatch.setattr(
            TicketType, "ocupa_assento", property(lambda self: self is TicketType.ADULT)
        )
        totals = TicketTotals(
            total_tickets=6,
            total_adult_tickets=2,
            total_child_tickets=3,
            total_infant_tickets=1,
        )

        assert totals.total_seats == 2

    def test_sem_solicitacoes(self):
        totals = TicketTotals.from_requests([])

        assert totals == TicketTotals()
        assert totals.total_amount == 0
        assert totals.total_seats == 0

    def test_cada_chamada_gera_instancia_nova(self):
        """Totais de uma compra não vazam para a próxima."""
        primeiro = TicketTotals.from_requests([TicketTypeRequest("ADULT", 5)])
        segundo = TicketTotals.from_requests([TicketTypeRequest("ADULT", 1)])

        assert primeiro.total_adult_tickets == 5
        assert segundo.total_adult_tickets == 1
        assert primeiro is not segundo

    def test_to_dict(self):
        totals = TicketTotals.from_requests([TicketTypeRequest("ADULT", 3)])

        assert totals.to_dict() == {
            "total_tickets": 3,
            "total_adult_tickets": 3,
            "total_child_tickets": 0,
            "total_infant_tickets": 0,
            "total_amount": 75,
            "total_seats": 3,
        }
