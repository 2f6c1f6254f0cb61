from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, StoreError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.after_request
    def allow_cross_origin(response):
        # The browser front end is served from another origin.
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        response.headers.setdefault("Access-Control-Allow-Methods", "GET, POST, PUT, DELETE, OPTIONS")
        response.headers.setdefault("Access-Control-Allow-Headers", "Content-Type")
        return response

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        body = request.get_json(silent=True) or {}
        employee = body.get("employee") if isinstance(body, dict) else None

        try:
            employee_id, data = container.employee_service.create_employee(employee)
        except ValidationError:
            return jsonify({"message": "Employee data is missing or invalid"}), 400
        except StoreError:
            return jsonify({"message": "Failed to add employee"}), 500

        return jsonify({"id": employee_id, "employee": data, "message": "Employee added successfully"}), 200

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = container.employee_service.list_employees()
        except StoreError:
            return jsonify({"message": "Failed to fetch employees"}), 500
        return jsonify(employees), 200

    @app.route("/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        try:
            container.employee_service.delete_employee(employee_id)
        except NotFoundError:
            return jsonify({"message": "Employee not found"}), 404
        except StoreError:
            return jsonify({"message": "Failed to delete employee"}), 500
        return jsonify({"message": "Employee deleted successfully"}), 200

    @app.route("/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        payload = request.get_json(silent=True)

        try:
            container.employee_service.update_employee(employee_id, payload)
        except ValidationError:
            return jsonify({"message": "No data provided to update"}), 400
        except NotFoundError:
            return jsonify({"message": "Employee not found"}), 404
        except StoreError:
            return jsonify({"message": "Failed to update employee"}), 500
        return jsonify({"message": "Employee updated successfully"}), 200
