from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import domain_error_response, json_body, unexpected_error_response
from ..container import Container
from ..core.constants import CONTRIBUTION_DELETED
from ..core.exceptions import DomainError
from .schemas import ContributionCreate, ContributionUpdate


def register(app: Flask, container: Container) -> None:
    service = container.contribution_service

    @app.route("/contributions", methods=["GET"], endpoint="list_contributions")
    def list_contributions():
        try:
            return jsonify([c.to_dict() for c in service.list_contributions()])
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="list_contributions_failed")

    @app.route("/contributions", methods=["POST"], endpoint="create_contribution")
    def create_contribution():
        try:
            populated = service.create_contribution(ContributionCreate.from_payload(json_body()))
            return jsonify(populated.to_dict()), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="create_contribution_failed")

    @app.route("/contributions/employee/<employee_id>", methods=["GET"], endpoint="employee_contributions")
    def employee_contributions(employee_id: str):
        try:
            return jsonify([c.to_dict() for c in service.list_for_employee(employee_id)])
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="employee_contributions_failed")

    @app.route("/contributions/<contribution_id>", methods=["GET"], endpoint="get_contribution")
    def get_contribution(contribution_id: str):
        try:
            return jsonify(service.get_contribution(contribution_id).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="get_contribution_failed")

    @app.route("/contributions/<contribution_id>", methods=["PUT"], endpoint="update_contribution")
    def update_contribution(contribution_id: str):
        try:
            populated = service.update_contribution(contribution_id, ContributionUpdate.from_payload(json_body()))
            return jsonify(populated.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="update_contribution_failed")

    @app.route("/contributions/<contribution_id>", methods=["DELETE"], endpoint="delete_contribution")
    def delete_contribution(contribution_id: str):
        try:
            service.delete_contribution(contribution_id)
            return jsonify({"message": CONTRIBUTION_DELETED})
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            return unexpected_error_response(e, event="delete_contribution_failed")
