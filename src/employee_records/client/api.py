"""HTTP wrapper around the ``/employees`` gateway."""
from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ..common.logging import get_logger

logger = get_logger(__name__)


class EmployeesApiError(Exception):
    """Transport failure or non-2xx answer from the gateway."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmployeesApi:
    def __init__(self, base_url: str, *, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise EmployeesApiError(f"{method} {url} failed: {exc}") from exc

        if not response.ok:
            message = None
            try:
                payload = response.json()
            except ValueError:
                payload = None
            if isinstance(payload, dict):
                message = payload.get("message")
            raise EmployeesApiError(message or f"HTTP {response.status_code}", status_code=response.status_code)

        return response.json()

    def list_employees(self) -> List[Dict[str, Any]]:
        return list(self._request("GET", "/employees"))

    def create_employee(self, employee: Dict[str, Any]) -> str:
        """POST a draft; returns the store-assigned id."""
        data = self._request("POST", "/employees", json={"employee": employee})
        return str(data["id"])

    def delete_employee(self, employee_id: str) -> None:
        self._request("DELETE", f"/employees/{quote(str(employee_id), safe='')}")

    def update_employee(self, employee: Dict[str, Any]) -> None:
        employee_id = employee["id"]
        self._request("PUT", f"/employees/{quote(str(employee_id), safe='')}", json=employee)
