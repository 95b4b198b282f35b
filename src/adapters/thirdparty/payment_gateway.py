"""
Payment Gateway - Serviço de pagamento de terceiros.

Ponto de integração com o provedor de pagamentos. A implementação
real pertence ao provedor; este adapter apenas valida os tipos
dos argumentos, como o provedor faz, e registra a chamada.
"""

import logging

logger = logging.getLogger(__name__)


class TicketPaymentService:
    """
    Adapter do serviço de pagamento (implementa PaymentGateway).

    Assume-se que o pagamento sempre é aceito; falhas são
    responsabilidade do provedor.
    """

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """
        Cobra valor na conta.

        Args:
            account_id: ID da conta
            total_amount_to_pay: Valor total

        Raises:
            TypeError: Se algum argumento não for inteiro
        """
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise TypeError("account_id must be an integer")

        if isinstance(total_amount_to_pay, bool) or not isinstance(total_amount_to_pay, int):
            raise TypeError("total_amount_to_pay must be an integer")

        logger.info(
            f"[PAYMENT] conta={account_id} | valor={total_amount_to_pay}"
        )
