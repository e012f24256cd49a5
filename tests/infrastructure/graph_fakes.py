"""Fake Microsoft Graph endpoints for adapter tests."""

from __future__ import annotations

import json
from typing import Any

import httpx

GRAPH = "https://graph.microsoft.com/v1.0"


def raw_app(object_id: str, name: str | None = "App", expiry: str | None = "2026-10-06T12:00:00Z") -> dict[str, Any]:
    """Raw application record as returned by Graph."""
    credential: dict[str, Any] = {"keyId": f"{object_id}-key", "hint": "abc", "displayName": "secret"}
    if expiry is not None:
        credential["endDateTime"] = expiry
    return {
        "id": object_id,
        "appId": f"{object_id}-client",
        "displayName": name,
        "passwordCredentials": [credential],
    }


def raw_owner(owner_id: str, mail: str | None = None, upn: str | None = None) -> dict[str, Any]:
    """Raw owner record as returned by Graph."""
    return {
        "@odata.type": "#microsoft.graph.user",
        "id": owner_id,
        "displayName": owner_id,
        "mail": mail,
        "userPrincipalName": upn,
    }


class FakeGraph:
    """Route Graph requests to canned responses and record them."""

    def __init__(self) -> None:
        self.applications: dict[str, Any] = {}
        self.owners: dict[str, Any] = {}
        self.pages: list[list[Any]] = []
        self.failing_paths: set[str] = set()
        self.sent_mail: list[dict[str, Any]] = []
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v1.0")

        if path in self.failing_paths:
            return httpx.Response(500, json={"error": {"code": "InternalServerError"}})

        if request.method == "POST" and path.endswith("/sendMail"):
            self.sent_mail.append(json.loads(request.content))
            return httpx.Response(202)

        if path == "/applications":
            index = int(request.url.params.get("$skiptoken", "0"))
            body: dict[str, Any] = {"value": self.pages[index]}
            if index + 1 < len(self.pages):
                body["@odata.nextLink"] = f"{GRAPH}/applications?$skiptoken={index + 1}"
            return httpx.Response(200, json=body)

        parts = path.strip("/").split("/")
        if len(parts) == 3 and parts[0] == "applications" and parts[2] == "owners":
            return httpx.Response(200, json={"value": self.owners.get(parts[1], [])})
        if len(parts) == 2 and parts[0] == "applications" and parts[1] in self.applications:
            return httpx.Response(200, json=self.applications[parts[1]])

        return httpx.Response(404, json={"error": {"code": "Request_ResourceNotFound"}})
