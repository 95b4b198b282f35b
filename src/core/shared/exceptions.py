"""
Exceções de Domínio do Cinema Tickets.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    └── InvalidPurchaseException (compra de ingressos inválida)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            ticket_service.purchase_tickets(account_id, *requests)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class InvalidPurchaseException(DomainException):
    """
    Compra de ingressos inválida.

    Único tipo de erro para qualquer violação na compra: pedido vazio,
    conta inválida, solicitação malformada, categoria desconhecida,
    limite de ingressos ou proporção adulto/criança/bebê.

    O atributo ``rule`` identifica a regra violada de forma estável,
    enquanto ``message`` é o texto legível.

    Example:
        if total_tickets > MAX_TICKETS_PER_PURCHASE:
            raise InvalidPurchaseException(
                "Cannot purchase more than 25 tickets at a time",
                rule="max_tickets_exceeded"
            )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "INVALID_PURCHASE")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result
