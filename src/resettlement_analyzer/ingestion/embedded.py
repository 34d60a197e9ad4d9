"""Extraction of fields embedded in opaque transaction parameter strings.

``reqparams`` carries an XML-like ``<Bet .../>`` fragment and
``queryparams`` a JSON-like fragment. Neither grammar is formalized, so
matching stays pattern based and every lookup returns None on a miss.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

UNKNOWN_STATUS = "Unknown"


@dataclass
class StatusTransition:
    """OldStatus/NewStatus attribute pair from a <Bet> fragment."""

    old_status: str
    new_status: str


class EmbeddedFieldExtractor:
    """Pulls resettlement markers and identifiers out of raw parameter strings."""

    # IsResettlement="1"
    _RESETTLEMENT_FLAG = 'IsResettlement="1"'
    # OldStatus="Draw" NewStatus="Won"
    _RE_STATUS_TRANSITION = re.compile(r'OldStatus="([^"]+)" NewStatus="([^"]+)"')
    # "purchase_id":"775089056288182272"
    _RE_PURCHASE_ID = re.compile(r'"purchase_id":"([^"]+)"')

    def has_resettlement_flag(self, reqparams: Optional[str]) -> bool:
        if not reqparams:
            return False
        return self._RESETTLEMENT_FLAG in reqparams

    def status_transition(self, reqparams: Optional[str]) -> Optional[StatusTransition]:
        """Return the first status transition found, or None."""
        if not reqparams:
            return None
        m = self._RE_STATUS_TRANSITION.search(reqparams)
        if not m:
            return None
        return StatusTransition(old_status=m.group(1), new_status=m.group(2))

    def status_transition_or_unknown(self, reqparams: Optional[str]) -> StatusTransition:
        """Like status_transition, with both sides ``Unknown`` on a miss."""
        transition = self.status_transition(reqparams)
        if transition is None:
            return StatusTransition(old_status=UNKNOWN_STATUS, new_status=UNKNOWN_STATUS)
        return transition

    def purchase_id(self, queryparams: Optional[str]) -> Optional[str]:
        if not queryparams:
            return None
        m = self._RE_PURCHASE_ID.search(queryparams)
        return m.group(1) if m else None
