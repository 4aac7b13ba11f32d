"""Lifetime holds placed on foreign documents.

A page moved into another document may still be resolved from its original
owner when the receiving document is written. The registry records, for each
receiving ("bound") document, the foreign documents it depends on and keeps
them alive. Bound documents are referenced weakly, so discarding a bound
document drops its holds with it.

Mutual holds are the exception: when two documents each borrow pages from
the other, each keeps the other alive through the registry and neither is
ever discarded. One side has to call :meth:`ForeignHoldRegistry.release`
(or ``PageList.release_holds()``) once it has been written; the pair is then
freed as soon as both are unreferenced.
"""

from __future__ import annotations

import logging
import weakref
from typing import Any, Dict, Optional, Tuple

LOGGER = logging.getLogger("pdf_pagelist.holds")


class ForeignHoldRegistry:
    """Explicit mapping of bound document -> foreign documents kept alive."""

    def __init__(self) -> None:
        self._holds: "weakref.WeakKeyDictionary[Any, Dict[int, Any]]" = weakref.WeakKeyDictionary()

    def acquire(self, bound: Any, foreign: Any) -> None:
        """Hold *foreign* alive for as long as *bound* exists (idempotent)."""

        held = self._holds.setdefault(bound, {})
        if id(foreign) not in held:
            LOGGER.debug("Holding foreign %s 0x%x", type(foreign).__name__, id(foreign))
            if self.is_holding(foreign, bound):
                LOGGER.warning(
                    "Documents 0x%x and 0x%x now hold each other; release one side "
                    "explicitly once written",
                    id(bound),
                    id(foreign),
                )
        held[id(foreign)] = foreign

    def is_holding(self, bound: Any, foreign: Any) -> bool:
        return id(foreign) in self._holds.get(bound, {})

    def holds_for(self, bound: Any) -> Tuple[Any, ...]:
        return tuple(self._holds.get(bound, {}).values())

    def release(self, bound: Any, foreign: Optional[Any] = None) -> int:
        """Release one hold, or every hold of *bound* when *foreign* is ``None``.

        Returns the number of holds released.
        """

        held = self._holds.get(bound)
        if not held:
            return 0
        if foreign is None:
            released = len(held)
            del self._holds[bound]
        else:
            released = 1 if held.pop(id(foreign), None) is not None else 0
            if not held:
                del self._holds[bound]
        LOGGER.debug("Released %d foreign hold(s)", released)
        return released

    def __len__(self) -> int:
        return len(self._holds)


default_registry = ForeignHoldRegistry()


__all__ = ["ForeignHoldRegistry", "default_registry"]
