"""RosterService — save the registry to the roster file and load it back.

Load modes:

- append (default): records are appended as they are parsed.  A bad line
  aborts the load, but every record before it stays in the registry.
- replace (``roster.replace_on_load``): the whole file is parsed first
  and only then swapped in; any failure leaves the registry untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from payledger.infrastructure.roster_file import RosterParseError, iter_roster, write_roster
from payledger.services.base import BaseService
from payledger.services.result import ErrorCode, ServiceResult, failure
from payledger.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from payledger.domain.employees import Employee

log = structlog.get_logger(__name__)


class RosterService(BaseService):
    """Persistence operations over the ledger's roster file."""

    @traced
    def save(self) -> ServiceResult:
        """Write every employee to the roster file, in registry order."""
        op = "save_roster"
        path = self._ledger.roster_path
        fmt = self._ledger.roster_format
        try:
            count = write_roster(path, self._registry, fmt, encoding=self._ledger.encoding)
        except (OSError, UnicodeError) as exc:
            log.warning("roster.save_failed", path=str(path), error=str(exc))
            return failure(
                op,
                ErrorCode.IO_FAILURE,
                f"Could not write roster {path}: {getattr(exc, 'strerror', None) or exc}",
                path=str(path),
            )

        log.debug("roster.saved", path=str(path), count=count, format=fmt.value)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(path), "saved": count, "format": fmt.value},
        )

    @traced
    def load(self) -> ServiceResult:
        """Read the roster file into the registry."""
        op = "load_roster"
        path = self._ledger.roster_path
        fmt = self._ledger.roster_format
        replace = self._ledger.replace_on_load
        mode = "replace" if replace else "append"

        loaded = 0
        staged: list[Employee] = []
        try:
            with trace_span("parse_roster") as span:
                for employee in iter_roster(path, fmt, encoding=self._ledger.encoding):
                    if replace:
                        staged.append(employee)
                    else:
                        self._registry.add(employee)
                    loaded += 1
                if span is not None:
                    span.annotate("lines", loaded)
        except RosterParseError as exc:
            applied = 0 if replace else loaded
            log.warning(
                "roster.parse_failed",
                path=str(path),
                line=exc.line_no,
                reason=exc.reason,
                applied=applied,
            )
            return failure(
                op,
                ErrorCode.PARSE_FAILURE,
                f"Malformed roster {path}, {exc}",
                path=str(path),
                line=exc.line_no,
                content=exc.line,
                applied=applied,
                mode=mode,
            )
        except (OSError, UnicodeError) as exc:
            applied = 0 if replace else loaded
            log.warning("roster.load_failed", path=str(path), error=str(exc))
            return failure(
                op,
                ErrorCode.IO_FAILURE,
                f"Could not read roster {path}: {getattr(exc, 'strerror', None) or exc}",
                path=str(path),
                applied=applied,
                mode=mode,
            )

        if replace:
            self._registry.replace(staged)

        log.debug("roster.loaded", path=str(path), count=loaded, mode=mode)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "loaded": loaded,
                "total": len(self._registry),
                "mode": mode,
                "format": fmt.value,
            },
        )
