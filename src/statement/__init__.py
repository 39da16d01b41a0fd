"""Account statement records and JSON loading."""

from src.statement.loader import StatementLoader
from src.statement.models import AccountStatement, BalanceSummary, Transaction

__all__ = ["AccountStatement", "BalanceSummary", "StatementLoader", "Transaction"]
