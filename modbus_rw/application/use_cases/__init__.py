"""Use cases.

Each use case has a single public method (execute), receives its
collaborators through the constructor and returns a result DTO.
"""

from .run_transactions_result import (
    IterationResult,
    RunTransactionsResult,
    TransactionOutcome,
)
from .run_transactions_use_case import RunTransactionsUseCase

__all__ = [
    "IterationResult",
    "RunTransactionsResult",
    "RunTransactionsUseCase",
    "TransactionOutcome",
]
