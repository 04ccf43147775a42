"""Settled result model - outcome of one retry session"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class SettleStatus(str, Enum):
    """How a retry session settled"""

    FULFILLED = "fulfilled"
    REJECTED = "rejected"


@dataclass(frozen=True)
class SettledResult:
    """Outcome of a retry session, as collected by retry_all_settled"""

    status: SettleStatus
    value: Any = None  # Produced value when fulfilled
    reason: Optional[BaseException] = None  # Final failure when rejected

    @classmethod
    def fulfilled(cls, value: Any) -> "SettledResult":
        return cls(status=SettleStatus.FULFILLED, value=value)

    @classmethod
    def rejected(cls, reason: BaseException) -> "SettledResult":
        return cls(status=SettleStatus.REJECTED, reason=reason)

    @property
    def is_fulfilled(self) -> bool:
        return self.status == SettleStatus.FULFILLED

    @property
    def is_rejected(self) -> bool:
        return self.status == SettleStatus.REJECTED
