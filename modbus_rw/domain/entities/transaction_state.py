"""Transaction state enum for master-side exchanges."""

from enum import Enum


class TransactionState(Enum):
    """Exchange states."""

    PENDING = "pending"  # Created but not yet executed
    EXECUTING = "executing"  # Request sent, waiting for response
    COMPLETED = "completed"  # Response (or exception response) received
    FAILED = "failed"  # Transport or protocol failure
