"""Run Transactions Result DTOs.

Data Transfer Objects describing the outcome of each exchange of a
transaction run and the run as a whole.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class TransactionOutcome(Enum):
    """Classification of one exchange."""

    SUCCESS = "success"  # Matching response, values reported
    SLAVE_ERROR = "slave_error"  # Peer rejected the request
    IO_ERROR = "io_error"  # Timeout or connection failure
    PROTOCOL_ERROR = "protocol_error"  # Malformed exchange
    NO_RESPONSE = "no_response"  # Neither a value nor a failure
    EXCEPTION_RESPONSE = "exception_response"  # Exception response returned
    UNKNOWN_RESPONSE = "unknown_response"  # Unrecognized response type


@dataclass
class IterationResult:
    """Result of one exchange.

    Attributes:
        index: Zero-based iteration number
        outcome: Classification of the exchange
        values: Read register values (signed or unsigned per run setting)
        error: Human-readable failure description
        exception_code: Modbus exception code, if the slave returned one
    """

    index: int
    outcome: TransactionOutcome
    values: List[int] = field(default_factory=list)
    error: str = ""
    exception_code: Optional[int] = None

    @property
    def success(self) -> bool:
        """Whether the exchange produced register values."""
        return self.outcome is TransactionOutcome.SUCCESS

    @property
    def word_count(self) -> int:
        """Number of register values reported."""
        return len(self.values)


@dataclass
class RunTransactionsResult:
    """Result of a whole transaction run.

    Attributes:
        iterations: One result per executed iteration, in order
    """

    iterations: List[IterationResult] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        """Number of successful exchanges."""
        return sum(1 for iteration in self.iterations if iteration.success)

    @property
    def failure_count(self) -> int:
        """Number of exchanges with any other outcome."""
        return len(self.iterations) - self.success_count

    def count_by_outcome(self) -> Dict[TransactionOutcome, int]:
        """Number of exchanges per outcome (outcomes that occurred only)."""
        return dict(Counter(iteration.outcome for iteration in self.iterations))
