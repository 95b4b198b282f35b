"""
Constantes de negócio da compra de ingressos.

Valores fixos durante toda a vida do processo; não são lidos
de variáveis de ambiente.
"""

from types import MappingProxyType

# Restrições do pedido
MAX_TICKETS_PER_PURCHASE: int = 25

# Preço unitário por categoria (nome do TicketType)
TICKET_PRICES = MappingProxyType({
    "ADULT": 25,
    "CHILD": 15,
    "INFANT": 0,
})
