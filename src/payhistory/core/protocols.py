"""Protocol interfaces for payhistory's external collaborators.

Reference data is supplied by the caller; these Protocols describe the shape
the calculator needs, so any table-like object can be passed in.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Inflation reference data
# ---------------------------------------------------------------------------

@runtime_checkable
class IInflationSource(Protocol):
    """Year-indexed annual inflation rates in percentage units.

    Returns None for years the source has no figure for (typically the
    current, not-yet-published year); callers substitute a default rate.
    """

    def rate_for(self, year: int) -> float | None: ...
