from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    employee_service: EmployeeService
    conn: Optional[DatabaseConnection] = None


def build_container(*, store_backend: str = "memory", db_config: Optional[dict] = None) -> Container:
    conn = None
    if store_backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql store backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        employees_repo: EmployeeRepository = MySQLEmployeeRepository(conn)
    elif store_backend == "memory":
        employees_repo = InMemoryEmployeeRepository()
    else:
        raise ValueError(f"Unknown STORE_BACKEND: {store_backend!r}")

    return Container(
        employees_repo=employees_repo,
        employee_service=EmployeeService(employees_repo),
        conn=conn,
    )


def container_for(employees_repo: EmployeeRepository) -> Container:
    """Container around an already-built store (tests, embedding)."""
    return Container(employees_repo=employees_repo, employee_service=EmployeeService(employees_repo))
