from __future__ import annotations

import os

import pytest

os.environ.setdefault("APP_ENV", "testing")

from employee_records import create_app
from employee_records.container import container_for
from employee_records.employees.memory_employee_repository import InMemoryEmployeeRepository


@pytest.fixture
def repo():
    return InMemoryEmployeeRepository()


@pytest.fixture
def app(repo):
    app = create_app(container_for(repo))
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def valid_employee():
    return {"name": "A", "surname": "B", "email": "a@b.com", "idNumber": "123"}
