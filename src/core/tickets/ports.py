"""
Ports (Interfaces) do Domínio de Ingressos.

Define os contratos que os serviços externos de pagamento e
reserva de assentos devem cumprir. O core apenas invoca esses
serviços; o comportamento interno deles pertence a terceiros.

Tipos de Ports:
- PaymentGateway: Cobrança do valor do pedido
- SeatReservationGateway: Reserva dos assentos do pedido

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter
    class TicketPaymentService:
        def make_payment(self, account_id: int, total_amount: int) -> None:
            ...
"""

from typing import List, Protocol, Tuple, runtime_checkable


@runtime_checkable
class PaymentGateway(Protocol):
    """
    Interface para cobrança de pedidos.

    Implementações:
    - TicketPaymentService (serviço de pagamento de terceiros)
    - InMemoryPaymentGateway (para testes)
    """

    def make_payment(self, account_id: int, total_amount: int) -> None:
        """
        Cobra o valor do pedido na conta.

        Args:
            account_id: ID da conta (inteiro positivo)
            total_amount: Valor total (inteiro não negativo)
        """
        ...


@runtime_checkable
class SeatReservationGateway(Protocol):
    """
    Interface para reserva de assentos.

    Implementações:
    - SeatReservationService (serviço de reservas de terceiros)
    - InMemorySeatReservationGateway (para testes)
    """

    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        """
        Reserva assentos para a conta.

        Args:
            account_id: ID da conta (inteiro positivo)
            total_seats: Número de assentos (inteiro não negativo)
        """
        ...


class InMemoryPaymentGateway:
    """
    Implementação em memória do PaymentGateway.

    Útil para:
    - Testes unitários
    - Desenvolvimento local

    Não usar em produção!

    Example:
        gateway = InMemoryPaymentGateway()
        gateway.make_payment(1, 65)
        gateway.payments  # [(1, 65)]
    """

    def __init__(self):
        self.payments: List[Tuple[int, int]] = []

    def make_payment(self, account_id: int, total_amount: int) -> None:
        """Registra pagamento em memória."""
        self.payments.append((account_id, total_amount))

    def clear(self) -> None:
        """Limpa pagamentos registrados (útil para testes)."""
        self.payments.clear()


class InMemorySeatReservationGateway:
    """
    Implementação em memória do SeatReservationGateway.

    Não usar em produção!
    """

    def __init__(self):
        self.reservations: List[Tuple[int, int]] = []

    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        """Registra reserva em memória."""
        self.reservations.append((account_id, total_seats))

    def clear(self) -> None:
        self.reservations.clear()
