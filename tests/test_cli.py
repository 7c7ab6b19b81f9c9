import json

from typer.testing import CliRunner

from commercetools import __version__
from commercetools.cli import app

from _stubs import StubTransport, make_client

runner = CliRunner()


def _patch_client(monkeypatch, transport):
    monkeypatch.setattr("commercetools.cli._make_client", lambda: make_client(transport))


def test_get_command_prints_json(monkeypatch):
    transport = StubTransport(body={"id": "abc", "version": 2})
    _patch_client(monkeypatch, transport)

    result = runner.invoke(app, ["get", "/tax-categories/abc", "--expand", "rates"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"id": "abc", "version": 2}
    assert transport.requests[0].url.endswith("/my-project/tax-categories/abc?expand=rates")


def test_query_command_builds_query(monkeypatch):
    body = {"limit": 5, "offset": 0, "count": 1, "total": 1, "results": [{"id": "a1", "key": "std", "version": 3}]}
    transport = StubTransport(body=body)
    _patch_client(monkeypatch, transport)

    result = runner.invoke(
        app,
        [
            "query",
            "/tax-categories",
            "--where",
            'key = "std"',
            "--sort",
            "name asc",
            "--sort",
            "id desc",
            "--limit",
            "5",
            "--with-total",
            "--format",
            "json",
        ],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["results"][0]["id"] == "a1"
    query = transport.requests[0].url.split("?", 1)[1]
    assert query == "where=key+%3D+%22std%22&sort=name+asc&sort=id+desc&limit=5&withTotal=true"


def test_query_command_table_output(monkeypatch):
    body = {"limit": 20, "offset": 0, "count": 1, "results": [{"id": "a1", "key": "std", "version": 3}]}
    _patch_client(monkeypatch, StubTransport(body=body))

    result = runner.invoke(app, ["query", "/tax-categories"])

    assert result.exit_code == 0
    assert "a1" in result.stdout
    assert "std" in result.stdout


def test_error_response_exits_non_zero(monkeypatch):
    body = {
        "statusCode": 403,
        "message": "Insufficient scope",
        "errors": [{"code": "insufficient_scope", "message": "Insufficient scope"}],
    }
    _patch_client(monkeypatch, StubTransport(status=403, body=body))

    result = runner.invoke(app, ["get", "/orders/1"])

    assert result.exit_code == 1
    assert "Insufficient scope" in result.stdout
    assert "insufficient_scope" in result.stdout


def test_user_agent_command():
    result = runner.invoke(app, ["user-agent", "--library-name", "my-app", "--contact-email", "ops@example.org"])
    assert result.exit_code == 0
    assert result.stdout.startswith(f"commercetools-python-sdk/{__version__} ")
    assert result.stdout.strip().endswith("my-app (+ops@example.org)")


def test_config_command_shows_exports():
    result = runner.invoke(app, ["config", "--project-key", "demo"])
    assert result.exit_code == 0
    assert "export CTP_PROJECT_KEY=demo" in result.stdout
