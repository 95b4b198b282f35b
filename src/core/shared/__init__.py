"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
"""

from .exceptions import (
    DomainException,
    InvalidPurchaseException,
)

__all__ = [
    "DomainException",
    "InvalidPurchaseException",
]
