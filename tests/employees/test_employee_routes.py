from __future__ import annotations

from employee_records.container import container_for
from employee_records import create_app


class BrokenRepo:
    def create(self, data):
        raise RuntimeError("secret connection string")

    def list_all(self):
        raise RuntimeError("secret connection string")

    def get_by_id(self, employee_id):
        raise RuntimeError("secret connection string")

    def delete_by_id(self, employee_id):
        raise RuntimeError("secret connection string")

    def update(self, employee_id, fields):
        raise RuntimeError("secret connection string")


def test_post_returns_id_employee_and_message(client, valid_employee):
    before = len(client.get("/employees").get_json())

    resp = client.post("/employees", json={"employee": valid_employee})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["employee"] == valid_employee
    assert body["message"] == "Employee added successfully"
    assert isinstance(body["id"], str) and body["id"]

    listed = client.get("/employees").get_json()
    assert len(listed) == before + 1
    assert {"id": body["id"], **valid_employee} in listed


def test_post_missing_field_is_400(client, valid_employee):
    payload = dict(valid_employee, idNumber="")

    resp = client.post("/employees", json={"employee": payload})

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Employee data is missing or invalid"}
    assert client.get("/employees").get_json() == []


def test_post_without_employee_key_is_400(client):
    assert client.post("/employees", json={}).status_code == 400
    assert client.post("/employees", data="not json", content_type="text/plain").status_code == 400


def test_list_preserves_insertion_order(client, valid_employee):
    ids = []
    for n in range(3):
        resp = client.post("/employees", json={"employee": dict(valid_employee, name=f"N{n}")})
        ids.append(resp.get_json()["id"])

    listed = client.get("/employees").get_json()

    assert [e["id"] for e in listed] == ids


def test_delete_existing_then_gone(client, valid_employee):
    employee_id = client.post("/employees", json={"employee": valid_employee}).get_json()["id"]

    resp = client.delete(f"/employees/{employee_id}")

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Employee deleted successfully"}
    assert client.get("/employees").get_json() == []


def test_delete_unknown_is_404(client):
    resp = client.delete("/employees/zzz")

    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Employee not found"}


def test_put_merges_payload(client, valid_employee):
    employee_id = client.post("/employees", json={"employee": valid_employee}).get_json()["id"]

    resp = client.put(f"/employees/{employee_id}", json={"id": employee_id, "surname": "C"})

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Employee updated successfully"}
    assert client.get("/employees").get_json() == [{**valid_employee, "id": employee_id, "surname": "C"}]


def test_put_empty_body_is_400(client, valid_employee):
    employee_id = client.post("/employees", json={"employee": valid_employee}).get_json()["id"]

    resp = client.put(f"/employees/{employee_id}", json={})

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "No data provided to update"}


def test_put_unknown_is_404(client):
    resp = client.put("/employees/nope", json={"name": "X"})

    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Employee not found"}


def test_store_errors_map_to_500_with_fixed_messages(valid_employee):
    client = create_app(container_for(BrokenRepo())).test_client()

    cases = [
        (client.post("/employees", json={"employee": valid_employee}), "Failed to add employee"),
        (client.get("/employees"), "Failed to fetch employees"),
        (client.delete("/employees/x"), "Failed to delete employee"),
        (client.put("/employees/x", json={"name": "A"}), "Failed to update employee"),
    ]

    for resp, message in cases:
        assert resp.status_code == 500
        assert resp.get_json() == {"message": message}
        assert b"secret" not in resp.data


def test_cors_headers_present(client):
    resp = client.get("/employees")

    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert client.options("/employees").status_code == 200


def test_post_zero_or_false_required_field_is_400(client, valid_employee):
    for payload in (dict(valid_employee, idNumber=0), dict(valid_employee, email=False)):
        resp = client.post("/employees", json={"employee": payload})

        assert resp.status_code == 400
        assert resp.get_json() == {"message": "Employee data is missing or invalid"}
    assert client.get("/employees").get_json() == []


def test_post_whitespace_name_is_accepted(client, valid_employee):
    resp = client.post("/employees", json={"employee": dict(valid_employee, name="   ")})

    assert resp.status_code == 200
    assert resp.get_json()["employee"]["name"] == "   "
