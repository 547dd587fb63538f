"""HTTP client for the REST API.

Mirrors the service modules the single-page front end uses, for scripts and
other Python callers.
"""
from __future__ import annotations

import os
from typing import Any, Dict, Optional

import requests

DEFAULT_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class _BaseClient:
    resource = ""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    def _url(self, *parts: str) -> str:
        return "/".join([self._base_url, self.resource, *parts])

    def _request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        response = self._session.request(method, url, json=payload, timeout=self._timeout)
        if not response.ok:
            try:
                message = response.json().get("message", response.reason)
            except ValueError:
                message = response.reason
            raise ApiError(response.status_code, message)
        return response.json()

    def get_all(self) -> Any:
        return self._request("GET", self._url())

    def get_by_id(self, record_id: str) -> Any:
        return self._request("GET", self._url(record_id))

    def create(self, data: Dict[str, Any]) -> Any:
        return self._request("POST", self._url(), data)

    def update(self, record_id: str, data: Dict[str, Any]) -> Any:
        return self._request("PUT", self._url(record_id), data)

    def delete(self, record_id: str) -> Any:
        return self._request("DELETE", self._url(record_id))


class EmployeeClient(_BaseClient):
    resource = "employees"


class ContributionClient(_BaseClient):
    resource = "contributions"

    def get_by_employee_id(self, employee_id: str) -> Any:
        return self._request("GET", self._url("employee", employee_id))
