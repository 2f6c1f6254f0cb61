from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from ..common.logging import get_logger
from ..common.validators import require_fields
from ..core.constants import REQUIRED_EMPLOYEE_FIELDS
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from .repository import EmployeeRepository

logger = get_logger(__name__)


class EmployeeService:
    """Use case: create, list, delete and update employee documents.

    Validation and error mapping live here so the store behind
    ``EmployeeRepository`` can be swapped freely. Store failures are logged
    and re-raised as ``StoreError`` with no detail attached.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def create_employee(self, payload: Any) -> Tuple[str, Dict[str, Any]]:
        require_fields(payload, REQUIRED_EMPLOYEE_FIELDS)
        data = {k: v for k, v in payload.items() if k != "id"}
        try:
            employee_id = self._employees.create(data)
        except Exception as e:
            logger.exception("Error adding employee")
            raise StoreError("Failed to add employee") from e
        return employee_id, data

    def list_employees(self) -> List[Dict[str, Any]]:
        try:
            employees = self._employees.list_all()
        except Exception as e:
            logger.exception("Error fetching employees")
            raise StoreError("Failed to fetch employees") from e
        return [emp.to_json() for emp in employees]

    def delete_employee(self, employee_id: str) -> None:
        deleted = False
        try:
            existing = self._employees.get_by_id(employee_id)
            if existing is not None:
                deleted = self._employees.delete_by_id(employee_id)
        except Exception as e:
            logger.exception("Error deleting employee %s", employee_id)
            raise StoreError("Failed to delete employee") from e

        if existing is None or not deleted:
            raise NotFoundError("Employee not found")

    def update_employee(self, employee_id: str, payload: Any) -> None:
        if not isinstance(payload, Mapping) or not payload:
            raise ValidationError("No data provided to update")

        # The identifier is immutable; an echoed "id" key is not a field.
        fields = {k: v for k, v in payload.items() if k != "id"}
        if not fields:
            raise ValidationError("No data provided to update")

        try:
            updated = self._employees.update(employee_id, fields)
        except Exception as e:
            logger.exception("Error updating employee %s", employee_id)
            raise StoreError("Failed to update employee") from e

        if not updated:
            raise NotFoundError("Employee not found")
