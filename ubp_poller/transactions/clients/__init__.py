from .base import BaseTransactionClient
from .unionbank import UnionBankClient

__all__ = ["BaseTransactionClient", "UnionBankClient"]
