"""Data models for detection results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from resettlement_analyzer.config.detection_methods import RESETTLEMENT_FLAG


def _compact(data: dict) -> dict:
    """Drop keys whose value is None, as JSON serialization of absent fields."""
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class OperationDescriptor:
    """Normalized credit operation from a transaction log."""

    id: Any = None
    date: Any = None
    amount: Any = None
    balance: Any = None
    old_status: str = "Unknown"
    new_status: str = "Unknown"
    request_id: Any = None
    # Untouched source record
    record: Optional[Mapping] = field(default=None, repr=False)

    def to_dict(self) -> dict:
        return _compact({
            "id": self.id,
            "date": self.date,
            "amount": self.amount,
            "balance": self.balance,
            "oldStatus": self.old_status,
            "newStatus": self.new_status,
            "requestId": self.request_id,
        })


@dataclass
class SettlementDescriptor:
    """Normalized settlement history entry with status names resolved."""

    date: Any = None
    old_status: str = ""
    new_status: str = ""
    gain: Any = None
    previous_balance: Any = None
    employee_id: Any = None
    account_operation_id: Any = None

    @property
    def is_manual(self) -> bool:
        """True when a human operator (positive employee id) applied it."""
        employee_id = self.employee_id
        if isinstance(employee_id, bool) or not isinstance(employee_id, (int, float)):
            return False
        return employee_id > 0

    def to_dict(self) -> dict:
        return _compact({
            "date": self.date,
            "oldStatus": self.old_status,
            "newStatus": self.new_status,
            "gain": self.gain,
            "previousBalance": self.previous_balance,
            "employeeId": self.employee_id,
            "accountOperationId": self.account_operation_id,
        })


@dataclass
class DetectionResult:
    """Outcome of a resettlement check.

    ``method`` names the heuristic that decided the outcome. Positive
    results carry the count that justified them plus the event history;
    negative results never carry operations or settlements.
    """

    is_resettlement: bool
    method: str

    credit_count: Optional[int] = None
    settlement_count: Optional[int] = None
    input_count: Optional[int] = None

    operations: Optional[list[OperationDescriptor]] = None
    settlements: Optional[list[SettlementDescriptor]] = None

    ticket_id: Any = None
    purchase_id: Any = None
    processed_inputs: Optional[Mapping] = None
    error: Optional[str] = None

    @property
    def event_count(self) -> int:
        """Count shown in summaries: settlements, else credits, else 0."""
        return self.settlement_count or self.credit_count or 0

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys of the wire format."""
        data = _compact({
            "isResettlement": self.is_resettlement,
            "method": self.method,
            "creditCount": self.credit_count,
            "settlementCount": self.settlement_count,
            "inputCount": self.input_count,
            "ticketId": self.ticket_id,
            "purchaseId": self.purchase_id,
            "processedInputs": self.processed_inputs,
            "error": self.error,
        })
        if self.operations is not None:
            data["operations"] = [self._operation_dict(op) for op in self.operations]
        if self.settlements is not None:
            data["settlements"] = [s.to_dict() for s in self.settlements]
        return data

    def _operation_dict(self, op: OperationDescriptor) -> dict:
        # a lone flagged credit is reported as the source record itself
        if self.method == RESETTLEMENT_FLAG and op.record is not None:
            return dict(op.record)
        return op.to_dict()


@dataclass
class BatchEntry:
    """One element of a batch run, keyed by its position in the input."""

    index: int
    data: Any
    result: DetectionResult

    @property
    def has_resettlement(self) -> bool:
        return self.result.is_resettlement

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "data": self.data,
            "result": self.result.to_dict(),
            "hasResettlement": self.has_resettlement,
        }
