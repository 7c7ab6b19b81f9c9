import json

from commercetools import Client, Config, StaticTokenProvider
from commercetools.transport import Response


class StubTransport:
    """Records requests and answers with a canned response."""

    def __init__(self, status=200, body=b"{}", headers=None, reason="", exc=None):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            body = body.encode("utf-8")
        self.response = Response(status_code=status, headers=headers or {}, content=body, reason=reason)
        self.exc = exc
        self.requests = []
        self.closed = False

    def do(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self):
        self.closed = True


def make_client(transport, token="test-token", **config):
    config.setdefault("api_url", "https://api.example.com")
    config.setdefault("project_key", "my-project")
    return Client(Config(**config), token_provider=StaticTokenProvider(token), transport=transport)
