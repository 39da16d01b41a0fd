"""Record types for an account statement.

Amounts are ``Optional[Decimal]``: a ``Decimal`` is a present value and
``None`` marks a cell with no data. Missing JSON fields load as zero values
(``""`` and ``Decimal("0")``); an explicit JSON ``null`` amount loads as None.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple

from src.utils.exceptions import DeserializationError

Amount = Optional[Decimal]

ZERO = Decimal("0")


def _get_string(data: Dict[str, Any], key: str, context: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DeserializationError(
            f"{context}.{key}: expected string, got {type(value).__name__}"
        )
    return value


def _get_amount(data: Dict[str, Any], key: str, context: str) -> Amount:
    if key not in data:
        return ZERO
    value = data[key]
    if value is None:
        return None
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise DeserializationError(
            f"{context}.{key}: expected number, got {type(value).__name__}"
        )
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise DeserializationError(f"{context}.{key}: invalid number {value!r}")
    if not amount.is_finite():
        raise DeserializationError(f"{context}.{key}: number must be finite")
    return amount


def _get_records(data: Dict[str, Any], key: str, context: str) -> List[Dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DeserializationError(
            f"{context}.{key}: expected array, got {type(value).__name__}"
        )
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise DeserializationError(
                f"{context}.{key}[{index}]: expected object, got {type(item).__name__}"
            )
    return value


@dataclass(frozen=True)
class Transaction:
    """One ledger line of the statement."""

    date: str = ""
    description: str = ""
    money_out: Amount = ZERO
    money_in: Amount = ZERO
    balance: Amount = ZERO

    @classmethod
    def from_dict(cls, data: Dict[str, Any], context: str = "transaction") -> "Transaction":
        return cls(
            date=_get_string(data, "date", context),
            description=_get_string(data, "description", context),
            money_out=_get_amount(data, "money_out", context),
            money_in=_get_amount(data, "money_in", context),
            balance=_get_amount(data, "balance", context),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "description": self.description,
            "money_out": self.money_out,
            "money_in": self.money_in,
            "balance": self.balance,
        }


@dataclass(frozen=True)
class BalanceSummary:
    """Opening/closing balance and period totals for one product."""

    product: str = ""
    opening_balance: Amount = ZERO
    closing_balance: Amount = ZERO
    money_in: Amount = ZERO
    money_out: Amount = ZERO

    @classmethod
    def from_dict(cls, data: Dict[str, Any], context: str = "balance_summary") -> "BalanceSummary":
        return cls(
            product=_get_string(data, "product", context),
            opening_balance=_get_amount(data, "opening_balance", context),
            closing_balance=_get_amount(data, "closing_balance", context),
            money_in=_get_amount(data, "money_in", context),
            money_out=_get_amount(data, "money_out", context),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product": self.product,
            "opening_balance": self.opening_balance,
            "closing_balance": self.closing_balance,
            "money_in": self.money_in,
            "money_out": self.money_out,
        }


@dataclass(frozen=True)
class AccountStatement:
    """Aggregate root: issuer, customer, account and the two tables."""

    company_name: str = ""
    company_address: str = ""
    customer_name: str = ""
    customer_address: str = ""
    account_name: str = ""
    account_number: str = ""
    report_generation_date: str = ""
    balance_summary: Tuple[BalanceSummary, ...] = ()
    transactions: Tuple[Transaction, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountStatement":
        """Build a statement from decoded JSON.

        Raises:
            DeserializationError: If data or one of its fields has the wrong type.
        """
        if not isinstance(data, dict):
            raise DeserializationError(
                f"statement: expected object, got {type(data).__name__}"
            )
        context = "statement"
        return cls(
            company_name=_get_string(data, "company_name", context),
            company_address=_get_string(data, "company_address", context),
            customer_name=_get_string(data, "customer_name", context),
            customer_address=_get_string(data, "customer_address", context),
            account_name=_get_string(data, "account_name", context),
            account_number=_get_string(data, "account_number", context),
            report_generation_date=_get_string(data, "report_generation_date", context),
            balance_summary=tuple(
                BalanceSummary.from_dict(item, f"balance_summary[{index}]")
                for index, item in enumerate(_get_records(data, "balance_summary", context))
            ),
            transactions=tuple(
                Transaction.from_dict(item, f"transactions[{index}]")
                for index, item in enumerate(_get_records(data, "transactions", context))
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert statement to a dictionary keyed by the JSON field names."""
        return {
            "company_name": self.company_name,
            "company_address": self.company_address,
            "customer_name": self.customer_name,
            "customer_address": self.customer_address,
            "account_name": self.account_name,
            "account_number": self.account_number,
            "report_generation_date": self.report_generation_date,
            "balance_summary": [summary.to_dict() for summary in self.balance_summary],
            "transactions": [transaction.to_dict() for transaction in self.transactions],
        }
