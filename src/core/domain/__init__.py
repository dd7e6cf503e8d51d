"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos que viajan por la API (Pydantic v2).
- El dominio no conoce HTTP ni la CLI: solo la forma de los datos.
"""

from core.domain.envelope import APIResponse, PaginatedData
from core.domain.students import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    CreateStudentRequest,
    ImportResult,
    ImportRowError,
    Student,
    StudentFilters,
    StudentStatus,
    UpdateStudentRequest,
)

__all__ = [
    "APIResponse",
    "CreateStudentRequest",
    "DEFAULT_LIMIT",
    "DEFAULT_OFFSET",
    "ImportResult",
    "ImportRowError",
    "PaginatedData",
    "Student",
    "StudentFilters",
    "StudentStatus",
    "UpdateStudentRequest",
]
