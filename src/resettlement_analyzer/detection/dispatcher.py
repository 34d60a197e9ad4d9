"""Entry points: route raw input to the matching detector."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from resettlement_analyzer.config import detection_methods as methods
from resettlement_analyzer.detection.models import DetectionResult
from resettlement_analyzer.detection.ticket_detail import TicketDetailDetector
from resettlement_analyzer.detection.transaction_log import TransactionLogDetector
from resettlement_analyzer.ingestion.classifier import (
    DetectionInput,
    TicketDetailInput,
    TransactionLogInput,
    classify_input,
    is_sequence,
)
from resettlement_analyzer.ingestion.models import TicketDetail, TransactionRecord

logger = logging.getLogger(__name__)

_transaction_log_detector = TransactionLogDetector()
_ticket_detail_detector = TicketDetailDetector()


def detect(data: Any) -> DetectionResult:
    """Classify ``data`` (transaction log list or ticket detail mapping).

    Never raises; unsupported shapes yield an ``Invalid data format`` result.
    """
    return detect_input(classify_input(data))


def detect_input(parsed: DetectionInput) -> DetectionResult:
    """Run the detector matching an already-classified input."""
    if isinstance(parsed, TransactionLogInput):
        return _transaction_log_detector.detect(parsed.records)
    if isinstance(parsed, TicketDetailInput):
        return _ticket_detail_detector.detect(parsed.ticket)

    logger.warning("Unsupported input type: %s", type(parsed.value).__name__)
    return DetectionResult(
        is_resettlement=False,
        method=methods.INVALID_DATA_FORMAT,
        error=methods.INVALID_DATA_MESSAGE,
    )


def detect_from_transaction_log(transactions: Sequence[Mapping]) -> DetectionResult:
    """Detect resettlement from an ordered list of transaction records."""
    if not is_sequence(transactions):
        transactions = []
    records = [TransactionRecord.from_dict(t) for t in transactions]
    return _transaction_log_detector.detect(records)


def detect_from_ticket_detail(ticket_detail: Mapping) -> DetectionResult:
    """Detect resettlement from a single ticket detail record."""
    if not isinstance(ticket_detail, Mapping):
        ticket_detail = {}
    return _ticket_detail_detector.detect(TicketDetail.from_dict(ticket_detail))
