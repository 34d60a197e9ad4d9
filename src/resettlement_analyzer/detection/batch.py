"""Batch detection over many inputs."""

from __future__ import annotations

import logging
from typing import Any

from resettlement_analyzer.detection.dispatcher import detect
from resettlement_analyzer.detection.models import BatchEntry
from resettlement_analyzer.ingestion.classifier import is_sequence

logger = logging.getLogger(__name__)


def batch_detect(inputs: Any) -> list[BatchEntry]:
    """Run ``detect`` on every element, keeping order and original index.

    Anything that is not a list or tuple gives an empty result.
    """
    if not is_sequence(inputs):
        return []

    entries = [
        BatchEntry(index=i, data=data, result=detect(data))
        for i, data in enumerate(inputs)
    ]
    logger.debug(
        "Batch of %d inputs, %d resettled",
        len(entries), sum(1 for e in entries if e.has_resettlement),
    )
    return entries


def filter_resettled(inputs: Any) -> list[BatchEntry]:
    """Batch entries whose input shows a resettlement, in input order."""
    return [entry for entry in batch_detect(inputs) if entry.has_resettlement]
