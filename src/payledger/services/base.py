"""BaseService — shared foundation for payledger services.

Every service receives a :class:`Ledger` at construction time and works
on the ledger's registry.  Services never raise for expected failures;
they return a failed :class:`ServiceResult` instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payledger.domain.registry import Registry
    from payledger.infrastructure.ledger import Ledger


class BaseService:
    """Base for service-layer classes.

    Usage::

        class PayrollService(BaseService):
            def query_salary(self, name: str) -> ServiceResult:
                employee = self._registry.find_by_name(name)
                ...
    """

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger

    @property
    def _registry(self) -> Registry:
        return self._ledger.registry
