from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import domain_error_response, json_body, unexpected_error_response
from ..container import Container
from ..core.constants import EMPLOYEE_DELETED, EMPLOYEE_UPDATED
from ..core.exceptions import DomainError
from .schemas import EmployeeCreate, EmployeeUpdate


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = service.list_employees()
            return jsonify([e.to_dict() for e in employees])
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="list_employees_failed")

    @app.route("/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        try:
            employee = service.create_employee(EmployeeCreate.from_payload(json_body()))
            return jsonify(employee.to_dict()), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="create_employee_failed")

    @app.route("/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        try:
            return jsonify(service.get_employee(employee_id).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="get_employee_failed")

    @app.route("/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        # Always success for a well-formed body, even when the id is unknown.
        try:
            service.update_employee(employee_id, EmployeeUpdate.from_payload(json_body()))
            return jsonify({"success": True, "message": EMPLOYEE_UPDATED})
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="update_employee_failed")

    @app.route("/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        try:
            service.delete_employee(employee_id)
            return jsonify({"message": EMPLOYEE_DELETED})
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="delete_employee_failed")
