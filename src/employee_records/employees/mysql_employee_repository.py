from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, new_document_id
from .repository import EmployeeRepository


def _load_document(raw: Any) -> Dict[str, Any]:
    # mysql-connector returns JSON columns as str (or bytes with some builds)
    if raw is None:
        return {}
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        return json.loads(raw)
    return dict(raw)


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, data: Mapping[str, Any]) -> str:
        employee_id = new_document_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO employees(id, document) VALUES(%s, %s)",
                (employee_id, json.dumps(dict(data))),
            )
        return employee_id

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, document FROM employees ORDER BY seq")
            rows = fetchall(cur)
            return [Employee(employee_id=r["id"], fields=_load_document(r["document"])) for r in rows]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, document FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            if not row:
                return None
            return Employee(employee_id=row["id"], fields=_load_document(row["document"]))

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return cur.rowcount > 0

    def update(self, employee_id: str, fields: Mapping[str, Any]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # Row lock keeps concurrent merges on one document serialized.
            cur.execute("SELECT document FROM employees WHERE id=%s FOR UPDATE", (employee_id,))
            row = fetchone(cur)
            if not row:
                return False
            document = _load_document(row["document"])
            document.update(fields)
            cur.execute(
                "UPDATE employees SET document=%s WHERE id=%s",
                (json.dumps(document), employee_id),
            )
            return True
