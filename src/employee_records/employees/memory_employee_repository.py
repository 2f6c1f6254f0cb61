from __future__ import annotations

import copy
import threading
from typing import Any, Dict, Mapping, Optional, Sequence

from .model import Employee, new_document_id
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Process-local store, enumerates in insertion order."""

    def __init__(self):
        self._docs: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def create(self, data: Mapping[str, Any]) -> str:
        with self._lock:
            employee_id = new_document_id()
            while employee_id in self._docs:
                employee_id = new_document_id()
            self._docs[employee_id] = copy.deepcopy(dict(data))
            return employee_id

    def list_all(self) -> Sequence[Employee]:
        with self._lock:
            return [Employee(employee_id=k, fields=copy.deepcopy(v)) for k, v in self._docs.items()]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            doc = self._docs.get(employee_id)
            if doc is None:
                return None
            return Employee(employee_id=employee_id, fields=copy.deepcopy(doc))

    def delete_by_id(self, employee_id: str) -> bool:
        with self._lock:
            return self._docs.pop(employee_id, None) is not None

    def update(self, employee_id: str, fields: Mapping[str, Any]) -> bool:
        with self._lock:
            doc = self._docs.get(employee_id)
            if doc is None:
                return False
            doc.update(copy.deepcopy(dict(fields)))
            return True
