"""commercetools CLI utilities built with Typer + Rich."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .client import Client, PagedQueryResponse
from .config import settings
from .errors import ErrorResponse, SDKError
from .query import QueryInput
from .useragent import build_user_agent

console = Console()
app = typer.Typer(help="Issue requests against the commercetools platform API.")


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def _make_client() -> Client:
    return Client()


def _print_error(exc: SDKError) -> None:
    if isinstance(exc, ErrorResponse):
        body: Any = exc.message
        if exc.errors:
            table = Table(show_header=True, header_style="bold magenta")
            table.add_column("code")
            table.add_column("message")
            for err in exc.errors:
                table.add_row(err.code, err.message)
            body = table
        console.print(Panel(body, title=f"Error {exc.status_code}: {exc.message}", border_style="red"))
        return
    console.print(Panel(str(exc) or type(exc).__name__, title=type(exc).__name__, border_style="red"))


def _results_table(page: PagedQueryResponse) -> Table:
    title = f"{page.count} result(s), offset {page.offset}"
    if page.total is not None:
        title += f", total {page.total}"
    table = Table(title=title, show_header=True, header_style="bold blue")
    table.add_column("id")
    table.add_column("key")
    table.add_column("version")
    for item in page.results:
        item = item if isinstance(item, dict) else {}
        table.add_row(str(item.get("id", "")), str(item.get("key", "") or ""), str(item.get("version", "")))
    return table


@app.command()
def config(
    project_key: Optional[str] = typer.Option(None, help="Project key to export."),
    client_id: Optional[str] = typer.Option(None, help="API client id to export."),
    client_secret: Optional[str] = typer.Option(None, help="API client secret to export."),
    api_url: Optional[str] = typer.Option(None, help="Optional custom API URL."),
):
    """Show shell commands to export credentials."""

    exports: List[str] = []
    if project_key:
        exports.append(f"export CTP_PROJECT_KEY={project_key}")
    if client_id:
        exports.append(f"export CTP_CLIENT_ID={client_id}")
    if client_secret:
        exports.append(f"export CTP_CLIENT_SECRET={client_secret}")
    if api_url:
        exports.append(f"export CTP_API_URL={api_url}")

    if not exports:
        exports = [
            "export CTP_PROJECT_KEY=<project-key>",
            "export CTP_CLIENT_ID=<client-id>",
            "export CTP_CLIENT_SECRET=<client-secret>",
            "export CTP_SCOPES=<optional-space-separated-scopes>",
            "export CTP_API_URL=<optional-api-url>",
            "export CTP_AUTH_URL=<optional-auth-url>",
        ]

    console.print(Panel("\n".join(exports), title="Add these to your shell", border_style="cyan"))


@app.command("user-agent")
def user_agent(
    library_name: str = typer.Option("", help="Calling library name."),
    library_version: str = typer.Option("", help="Calling library version."),
    contact_url: str = typer.Option("", help="Contact URL."),
    contact_email: str = typer.Option("", help="Contact email."),
):
    """Print the User-Agent header sent with every request."""
    s = settings()
    s.library_name = library_name or s.library_name
    s.library_version = library_version or s.library_version
    s.contact_url = contact_url or s.contact_url
    s.contact_email = contact_email or s.contact_email
    typer.echo(build_user_agent(s.to_config()))


@app.command()
def get(
    path: str = typer.Argument(..., help="Resource path relative to the project, e.g. /products/<id>."),
    expand: Optional[str] = typer.Option(None, help="Reference expansion path."),
):
    """Fetch a single resource and print it as JSON."""
    try:
        with _make_client() as client:
            result = client.get(path, expand=expand)
    except SDKError as exc:
        _print_error(exc)
        raise typer.Exit(code=1)
    console.print_json(data=result)


@app.command()
def query(
    path: str = typer.Argument(..., help="Resource collection path, e.g. /tax-categories."),
    where: Optional[str] = typer.Option(None, help="Query predicate."),
    sort: Optional[List[str]] = typer.Option(None, help="Sort expression; repeatable."),
    expand: Optional[str] = typer.Option(None, help="Reference expansion path."),
    limit: Optional[int] = typer.Option(None, min=0, help="Page size."),
    offset: Optional[int] = typer.Option(None, min=0, help="Page offset."),
    with_total: Optional[bool] = typer.Option(None, "--with-total/--without-total", help="Ask for the total count."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format.",
    ),
):
    """Query a resource collection."""
    query_input = QueryInput(
        where=where,
        sort=list(sort or []),
        expand=expand,
        limit=limit,
        offset=offset,
        with_total=with_total,
    )
    try:
        with _make_client() as client:
            page = client.query(path, query_input)
    except SDKError as exc:
        _print_error(exc)
        raise typer.Exit(code=1)

    if output_format is OutputFormat.JSON:
        console.print_json(
            data={
                "limit": page.limit,
                "offset": page.offset,
                "count": page.count,
                "total": page.total,
                "results": page.results,
            }
        )
        return
    console.print(_results_table(page))


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
