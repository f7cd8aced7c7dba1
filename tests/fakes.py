"""In-process fakes for the UnionBank API and the Slack webhook."""

import json
from typing import Any, Dict, List
from urllib.parse import parse_qs

import httpx


class FakeUnionBank:
    """
    MockTransport-backed partner API.

    Records and failure statuses are keyed by the account's client id.
    """

    def __init__(self):
        self.records: Dict[str, List[Dict[str, Any]]] = {}
        self.statuses: Dict[str, int] = {}
        self.raw_bodies: Dict[str, str] = {}
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path.endswith("/oauth2/token"):
            form = parse_qs(request.content.decode())
            client_id = form["client_id"][0]
            return httpx.Response(
                200,
                json={
                    "token_type": "Bearer",
                    "access_token": f"token-{client_id}",
                    "expires_in": 3600,
                },
            )

        client_id = request.headers["x-ibm-client-id"]
        status = self.statuses.get(client_id, 200)
        if status != 200:
            return httpx.Response(status, text='{"errors":[{"code":"401"}]}')
        if client_id in self.raw_bodies:
            return httpx.Response(200, text=self.raw_bodies[client_id])

        records = self.records.get(client_id, [])
        return httpx.Response(
            200, json={"Records": records, "totalRecords": len(records)}
        )

    def token_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    def transaction_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]


class FakeWebhook:
    """Captures the JSON bodies posted to the webhook."""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.posts: List[Dict[str, Any]] = []
        self.transport = httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.posts.append(json.loads(request.content))
        return httpx.Response(self.status_code, text="ok")

    @property
    def texts(self) -> List[str]:
        return [post["text"] for post in self.posts]
