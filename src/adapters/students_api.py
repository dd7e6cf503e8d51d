"""Funciones del recurso Student.

Cada función es una composición fina: construir la petición (path, query,
body) -> verbo del transporte -> `api_call`.

El transporte se recibe como primer argumento (ver
`core.interfaces.transport.Transport`); no hay cliente global.
"""

from __future__ import annotations

import logging
import mimetypes
import os
from pathlib import Path
from typing import IO, AsyncIterator
from urllib.parse import urlencode

from adapters.envelope import api_call
from core.domain.envelope import PaginatedData
from core.domain.students import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    CreateStudentRequest,
    ImportResult,
    Student,
    StudentFilters,
    UpdateStudentRequest,
)
from core.interfaces.transport import Transport

logger = logging.getLogger(__name__)

STUDENTS_PATH = "/students"
IMPORT_PATH = f"{STUDENTS_PATH}/import"
MULTIPART_FORM_DATA = "multipart/form-data"

# Formatos que acepta el backend para la carga masiva.
_IMPORT_CONTENT_TYPES = {
    ".csv": "text/csv",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

# Orden fijo de la query string; limit/offset siempre van al final.
_OPTIONAL_FILTERS = ("status", "cohort", "search", "residence_country_id")


def build_student_query(filters: StudentFilters | None = None) -> str:
    """Query string de `GET /students`.

    Los filtros opcionales vacíos se omiten (no se mandan como `key=`).
    """

    filters = filters or StudentFilters()
    params: list[tuple[str, str]] = []
    for key in _OPTIONAL_FILTERS:
        value = getattr(filters, key)
        if value:
            params.append((key, str(value)))

    limit = filters.limit if filters.limit is not None else DEFAULT_LIMIT
    offset = filters.offset if filters.offset is not None else DEFAULT_OFFSET
    params.append(("limit", str(limit)))
    params.append(("offset", str(offset)))
    return urlencode(params)


def _student_path(student_id: str) -> str:
    return f"{STUDENTS_PATH}/{student_id}"


async def get_students(client: Transport, filters: StudentFilters | None = None) -> PaginatedData[Student]:
    query = build_student_query(filters)
    return await api_call(client.get(f"{STUDENTS_PATH}?{query}"), PaginatedData[Student])


async def get_student(client: Transport, student_id: str) -> Student:
    return await api_call(client.get(_student_path(student_id)), Student)


async def create_student(client: Transport, data: CreateStudentRequest) -> Student:
    body = data.model_dump(mode="json", exclude_unset=True)
    return await api_call(client.post(STUDENTS_PATH, body), Student)


async def update_student(client: Transport, student_id: str, data: UpdateStudentRequest) -> Student:
    """PUT con semántica de parche parcial: solo viajan los campos informados."""

    body = data.model_dump(mode="json", exclude_unset=True)
    return await api_call(client.put(_student_path(student_id), body), Student)


async def delete_student(client: Transport, student_id: str) -> None:
    await api_call(client.delete(_student_path(student_id)))


def _multipart_content_type() -> str:
    # httpx reutiliza el boundary del header explícito al codificar el body.
    return f"{MULTIPART_FORM_DATA}; boundary={os.urandom(16).hex()}"


async def import_students(
    client: Transport,
    file: str | Path | IO[bytes] | bytes,
    *,
    filename: str | None = None,
    content_type: str | None = None,
) -> ImportResult:
    """Carga masiva desde CSV/XLSX.

    Acepta una ruta, un archivo binario abierto o bytes. El body es
    multipart con un único campo `file`; el header `Content-Type` de esta
    llamada reemplaza el JSON por defecto del cliente.
    """

    if isinstance(file, (str, Path)):
        path = Path(file)
        with path.open("rb") as handle:
            return await import_students(client, handle, filename=filename or path.name, content_type=content_type)

    if filename is None:
        # `TemporaryFile()` y `open(fd)` exponen un descriptor entero como name.
        name = getattr(file, "name", None)
        filename = Path(name).name if isinstance(name, (str, os.PathLike)) and name else "students.csv"
    if content_type is None:
        suffix = Path(filename).suffix.lower()
        content_type = (
            _IMPORT_CONTENT_TYPES.get(suffix) or mimetypes.guess_type(filename)[0] or "application/octet-stream"
        )

    logger.info("Importing students", extra={"upload_name": filename, "content_type": content_type})
    files = {"file": (filename, file, content_type)}
    headers = {"Content-Type": _multipart_content_type()}
    return await api_call(client.post(IMPORT_PATH, files=files, headers=headers), ImportResult)


async def iter_students(
    client: Transport,
    filters: StudentFilters | None = None,
    *,
    page_size: int | None = None,
) -> AsyncIterator[Student]:
    """Recorre todas las páginas a partir de `filters.offset`.

    Secuencial: una petición por página. Termina al alcanzar `total` o al
    recibir una página vacía.
    """

    filters = filters or StudentFilters()
    limit = page_size or filters.limit or DEFAULT_LIMIT
    offset = filters.offset or DEFAULT_OFFSET

    while True:
        page = await get_students(client, filters.model_copy(update={"limit": limit, "offset": offset}))
        for student in page.items:
            yield student
        offset += len(page.items)
        if not page.items or offset >= page.total:
            return
