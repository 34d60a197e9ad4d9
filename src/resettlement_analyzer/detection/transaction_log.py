"""Resettlement detection over wallet transaction logs."""

from __future__ import annotations

import logging
from typing import Any, Optional

from resettlement_analyzer.config import detection_methods as methods
from resettlement_analyzer.detection.models import DetectionResult, OperationDescriptor
from resettlement_analyzer.ingestion.embedded import EmbeddedFieldExtractor
from resettlement_analyzer.ingestion.models import TransactionRecord

logger = logging.getLogger(__name__)


class TransactionLogDetector:
    """Decides resettlement from the credit operations in a transaction log.

    A bet is credited once per settlement, so two or more credits mean it
    was settled again. A lone credit only counts when its request carries
    the ``IsResettlement="1"`` marker.
    """

    def __init__(self, extractor: Optional[EmbeddedFieldExtractor] = None) -> None:
        self._extractor = extractor or EmbeddedFieldExtractor()

    def detect(self, records: list[TransactionRecord]) -> DetectionResult:
        credits = [r for r in records if r.is_credit]

        if not credits:
            logger.debug("No credit operations among %d records", len(records))
            return DetectionResult(
                is_resettlement=False,
                method=methods.NO_CREDIT_OPERATIONS,
            )

        if len(credits) == 1:
            return self._check_single_credit(credits[0])

        logger.debug("Found %d credit operations", len(credits))
        return DetectionResult(
            is_resettlement=True,
            method=methods.MULTIPLE_CREDIT_OPERATIONS,
            credit_count=len(credits),
            operations=[self._describe(op) for op in credits],
            purchase_id=self._purchase_id(credits[0]),
        )

    def _check_single_credit(self, credit: TransactionRecord) -> DetectionResult:
        if self._extractor.has_resettlement_flag(credit.reqparams):
            logger.debug("Single credit %s carries the resettlement flag", credit.id)
            return DetectionResult(
                is_resettlement=True,
                method=methods.RESETTLEMENT_FLAG,
                credit_count=1,
                operations=[self._describe(credit)],
            )

        return DetectionResult(
            is_resettlement=False,
            method=methods.SINGLE_CREDIT_WITHOUT_FLAG,
            credit_count=1,
        )

    def _describe(self, credit: TransactionRecord) -> OperationDescriptor:
        transition = self._extractor.status_transition_or_unknown(credit.reqparams)
        return OperationDescriptor(
            id=credit.id,
            date=credit.creation_date,
            amount=credit.amount,
            balance=credit.balance,
            old_status=transition.old_status,
            new_status=transition.new_status,
            request_id=credit.request_id,
            record=credit.raw,
        )

    def _purchase_id(self, credit: TransactionRecord) -> Any:
        """Purchase id from the op-log column, else from the query string."""
        if credit.op_log_purchase_id:
            return credit.op_log_purchase_id
        return self._extractor.purchase_id(credit.queryparams)
