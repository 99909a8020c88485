"""Projection of Plaid transactions onto the app's transaction shape."""

from typing import Iterable, List

from budgetly.models.api import TransactionOut
from budgetly.models.plaid import PlaidTransaction


def to_transaction_out(transaction: PlaidTransaction) -> TransactionOut:
    return TransactionOut(
        name=transaction.name,
        amount=transaction.amount,
        date=transaction.date,
        merchant_name=transaction.merchant_name,
        account_id=transaction.account_id,
    )


def map_transactions(transactions: Iterable[PlaidTransaction]) -> List[TransactionOut]:
    """Map Plaid transactions one-to-one, preserving order."""
    return [to_transaction_out(transaction) for transaction in transactions]
