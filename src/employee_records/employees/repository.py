from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Store interface for employee documents.

    The service depends on this protocol only, so any key-value or relational
    backend can stand in for the document store.
    """

    def create(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError

    def update(self, employee_id: str, fields: Mapping[str, Any]) -> bool:
        """Merge ``fields`` into the stored document. False if it does not exist."""
        raise NotImplementedError
