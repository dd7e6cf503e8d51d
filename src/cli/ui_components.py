"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.envelope import PaginatedData
from core.domain.students import ImportResult, Student, StudentStatus

_STATUS_STYLES = {
    StudentStatus.ACTIVE: "green",
    StudentStatus.GRADUATED: "cyan",
    StudentStatus.WITHDRAWN: "yellow",
    StudentStatus.SUSPENDED: "red",
}


def build_students_table(students: Iterable[Student], *, title: str = "Students") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Cohort", style="magenta")
    table.add_column("Status")
    table.add_column("Emails", style="blue")
    for student in students:
        table.add_row(
            student.id,
            student.display_name,
            student.cohort,
            Text(student.status.value, style=_STATUS_STYLES.get(student.status, "white")),
            ", ".join(student.emails),
        )
    return table


def build_page_caption(page: PaginatedData[Student]) -> str:
    """Texto tipo `1-20 of 57`."""

    if not page.items:
        return f"0 of {page.total}"
    return f"{page.offset + 1}-{page.offset + len(page.items)} of {page.total}"


def build_student_panel(student: Student) -> Panel:
    """Panel con el detalle de un estudiante (solo campos informados)."""

    body = Text()
    for key, value in student.model_dump(mode="json", exclude_none=True).items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        body.append(f"{key}: ", style="bold")
        body.append(f"{value}\n")
    return Panel(body, title=Text(student.display_name or student.id, style="bold cyan"), border_style="cyan")


def build_import_panel(result: ImportResult) -> Panel:
    """Resumen de una importación masiva con los errores por fila."""

    body = Text()
    body.append(f"Rows: {result.total_rows}\n")
    body.append(f"Created: {result.created}\n", style="green")
    body.append(f"Errors: {len(result.errors)}\n", style="red" if result.errors else "dim")
    for err in result.errors:
        line = f"- row {err.row}"
        if err.field:
            line += f" [{err.field}]"
        if err.value:
            line += f" '{err.value}'"
        body.append(f"{line}: {err.message}\n")

    border = "yellow" if result.errors else "green"
    return Panel(body, title=Text("Import", style="bold"), border_style=border)
