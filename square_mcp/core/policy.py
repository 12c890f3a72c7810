"""Write Policy — blocks mutating Square operations when writes are disabled.

When ``settings.DISALLOW_WRITES`` is ``True`` every method whose descriptor
is flagged ``is_write`` is rejected before its handler runs.  The policy
is evaluated on each call, after the service and method have been resolved
and before anything is sent downstream.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from square_mcp.core.errors import WriteDisallowed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WritePolicy:
    """Enforces the write-operation gate on dispatch.

    Parameters
    ----------
    writes_disabled:
        Accessor for the process-wide "writes disabled" flag.  Read on
        every check rather than captured once.
    """

    writes_disabled: Callable[[], bool]

    def check(self, *, operation: str, is_write: bool) -> PolicyResult:
        """Evaluate whether ``operation`` may run.

        ``operation`` is the ``service.method`` label shown to the caller.
        """
        if is_write and self.writes_disabled():
            logger.warning("Blocked write operation %s", operation)
            return PolicyResult(allowed=False, operation=operation)
        return PolicyResult(allowed=True, operation=operation)


@dataclass(frozen=True)
class PolicyResult:
    """Outcome of a policy check."""

    allowed: bool
    operation: str = ""

    def enforce(self) -> None:
        """Raise :class:`WriteDisallowed` if the operation was blocked."""
        if not self.allowed:
            raise WriteDisallowed(self.operation)
