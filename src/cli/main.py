"""CLI `coordinador` (Typer + Rich).

Por qué una CLI fina:
- Toda la lógica vive en `adapters.students_api`; aquí solo se parsean
  opciones, se abre el cliente y se pinta el resultado.
- Útil para operar el backend (altas, importaciones, exports) sin la UI web.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, TypeVar

import httpx
import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console

from adapters.http_client import ApiClient
from adapters.json_exporter import export_students_json
from adapters.students_api import (
    create_student,
    delete_student,
    get_student,
    get_students,
    import_students,
    iter_students,
    update_student,
)
from cli import doctor
from cli.ui_components import (
    build_import_panel,
    build_page_caption,
    build_student_panel,
    build_students_table,
)
from core.config import ClientSettings
from core.domain.students import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    CreateStudentRequest,
    StudentFilters,
    StudentStatus,
    UpdateStudentRequest,
)
from core.errors import CoordinadorClientError
from core.logging_config import setup_logging

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

app = typer.Typer(no_args_is_help=True, help="Coordinador student-records client.")
students_app = typer.Typer(no_args_is_help=True, help="Manage students.")
app.add_typer(students_app, name="students")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def build_api_client(settings: ClientSettings | None = None) -> ApiClient:
    return ApiClient(settings or ClientSettings())


def _run(coro: Awaitable[T]) -> T:
    """Ejecuta la corrutina y traduce fallos de API a un exit code 1."""

    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except CoordinadorClientError as exc:
        _console.print(f"[red]API error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        _console.print(f"[red]HTTP error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _load_model(path: Path, model: type[M]) -> M:
    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc}") from exc
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    level = "DEBUG" if verbose else ClientSettings().log_level
    setup_logging(level)


@students_app.command("list")
def list_students(
    status: StudentStatus | None = typer.Option(None, help="Filter by status."),
    cohort: str | None = typer.Option(None, help="Filter by cohort."),
    search: str | None = typer.Option(None, "--search", "-s", help="Search by name."),
    country: str | None = typer.Option(None, "--country", help="Residence country id."),
    limit: int = typer.Option(DEFAULT_LIMIT, min=1),
    offset: int = typer.Option(DEFAULT_OFFSET, min=0),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """List one page of students."""

    filters = StudentFilters(
        status=status,
        cohort=cohort,
        search=search,
        residence_country_id=country,
        limit=limit,
        offset=offset,
    )

    async def _go():
        async with build_api_client() as client:
            return await get_students(client, filters)

    page = _run(_go())
    if as_json:
        _console.print_json(page.model_dump_json(exclude_none=True))
        return
    table = build_students_table(page.items)
    table.caption = build_page_caption(page)
    _console.print(table)


@students_app.command("get")
def show_student(student_id: str = typer.Argument(..., help="Student id.")) -> None:
    """Show a single student."""

    async def _go():
        async with build_api_client() as client:
            return await get_student(client, student_id)

    _console.print(build_student_panel(_run(_go())))


@students_app.command("create")
def create(
    data: Path = typer.Option(..., "--data", "-d", exists=True, dir_okay=False, help="JSON body file."),
) -> None:
    """Create a student from a JSON file."""

    request = _load_model(data, CreateStudentRequest)

    async def _go():
        async with build_api_client() as client:
            return await create_student(client, request)

    student = _run(_go())
    _console.print(f"[green]Created[/green] {student.id}")
    _console.print(build_student_panel(student))


@students_app.command("update")
def update(
    student_id: str = typer.Argument(..., help="Student id."),
    data: Path = typer.Option(..., "--data", "-d", exists=True, dir_okay=False, help="JSON body file (partial)."),
) -> None:
    """Update a student; only the fields present in the file change."""

    request = _load_model(data, UpdateStudentRequest)

    async def _go():
        async with build_api_client() as client:
            return await update_student(client, student_id, request)

    student = _run(_go())
    _console.print(f"[green]Updated[/green] {student.id}")
    _console.print(build_student_panel(student))


@students_app.command("delete")
def delete(
    student_id: str = typer.Argument(..., help="Student id."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
) -> None:
    """Delete a student."""

    if not yes:
        typer.confirm(f"Delete student {student_id}?", abort=True)

    async def _go():
        async with build_api_client() as client:
            await delete_student(client, student_id)

    _run(_go())
    _console.print(f"[green]Deleted[/green] {student_id}")


@students_app.command("import")
def import_file(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV or XLSX file."),
) -> None:
    """Bulk import students from a CSV/XLSX file."""

    async def _go():
        async with build_api_client() as client:
            return await import_students(client, file)

    result = _run(_go())
    _console.print(build_import_panel(result))
    if result.errors:
        raise typer.Exit(code=2)


@students_app.command("export")
def export(
    output: Path = typer.Argument(..., dir_okay=False, help="Output JSON file."),
    status: StudentStatus | None = typer.Option(None, help="Filter by status."),
    cohort: str | None = typer.Option(None, help="Filter by cohort."),
    search: str | None = typer.Option(None, "--search", "-s", help="Search by name."),
    country: str | None = typer.Option(None, "--country", help="Residence country id."),
) -> None:
    """Export every matching student (all pages) to JSON."""

    settings = ClientSettings()
    filters = StudentFilters(status=status, cohort=cohort, search=search, residence_country_id=country)

    async def _go():
        async with build_api_client(settings) as client:
            return [s async for s in iter_students(client, filters, page_size=settings.export_page_size)]

    students = _run(_go())
    path = export_students_json(students=students, output_path=output)
    _console.print(f"[green]Exported[/green] {len(students)} students to {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
