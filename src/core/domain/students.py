"""Modelos del recurso Student (Pydantic v2).

Por qué dos formas de nombre en el mismo modelo:
- El backend expone dos variantes del estudiante: nombres separados
  (`first_names`/`last_names`, `gender`, `nationality_country_id`, ...) o un
  único `full_name` (con `country_origin_id`). Mientras dura la migración se
  aceptan ambas; los campos desconocidos se conservan (`extra="allow"`).

Nota:
- Solo hay chequeo estructural. Fechas, emails y enumeraciones de las
  peticiones los valida el backend.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0


class StudentStatus(str, Enum):
    """Estado académico de un estudiante."""

    ACTIVE = "active"
    GRADUATED = "graduated"
    WITHDRAWN = "withdrawn"
    SUSPENDED = "suspended"


class Student(BaseModel):
    """Estudiante tal como lo devuelve el backend."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)

    # Nombres (forma separada o colapsada)
    first_names: str | None = None
    last_names: str | None = None
    full_name: str | None = None

    document_id: str | None = None
    birth_date: str = Field(..., description="Fecha de nacimiento tal como la envía el backend.")
    profile_photo_url: str | None = None
    gender: str | None = Field(default=None, description="'M' o 'F' en la forma separada.")

    # Procedencia
    nationality_country_id: str | None = None
    residence_country_id: str | None = None
    residence_city_id: str | None = None
    country_origin_id: str | None = None
    city_origin_id: str | None = None

    # Contacto
    emails: list[str] = Field(default_factory=list)
    phones: list[str] | None = None

    # Laboral
    company_id: str | None = None
    job_title_category_id: str | None = None
    profession_id: str | None = None

    # Estado académico
    student_code: str | None = None
    status: StudentStatus
    cohort: str
    enrollment_date: str
    graduation_date: str | None = None

    # Auditoría
    created_at: str
    created_by: str | None = None
    updated_at: str
    updated_by: str | None = None

    @property
    def display_name(self) -> str:
        if self.full_name:
            return self.full_name
        parts = [p for p in (self.first_names, self.last_names) if p]
        return " ".join(parts)


def _missing(model: BaseModel, names: tuple[str, ...]) -> list[str]:
    return [name for name in names if not getattr(model, name)]


_SPLIT_IDENTITY = ("first_names", "last_names", "nationality_country_id", "residence_country_id")
_COLLAPSED_IDENTITY = ("full_name", "country_origin_id")


class CreateStudentRequest(BaseModel):
    """Cuerpo de `POST /students`.

    Exige los campos de identidad de una de las dos formas y los de matrícula.
    """

    model_config = ConfigDict(use_enum_values=True)

    first_names: str | None = None
    last_names: str | None = None
    full_name: str | None = None
    document_id: str | None = None
    birth_date: str
    profile_photo_url: str | None = None
    gender: str | None = None
    nationality_country_id: str | None = None
    residence_country_id: str | None = None
    residence_city_id: str | None = None
    country_origin_id: str | None = None
    city_origin_id: str | None = None
    emails: list[str]
    phones: list[str] | None = None
    company_id: str | None = None
    job_title_category_id: str | None = None
    profession_id: str | None = None
    student_code: str | None = None
    status: StudentStatus | str
    cohort: str
    enrollment_date: str

    @model_validator(mode="after")
    def _check_identity_shape(self) -> "CreateStudentRequest":
        if self.full_name is not None and self.first_names is None and self.last_names is None:
            missing = _missing(self, _COLLAPSED_IDENTITY)
        else:
            missing = _missing(self, _SPLIT_IDENTITY)
        if missing:
            raise ValueError(f"missing identity fields: {', '.join(missing)}")
        return self


class UpdateStudentRequest(BaseModel):
    """Cuerpo de `PUT /students/{id}`: todo opcional, solo viaja lo informado."""

    model_config = ConfigDict(use_enum_values=True)

    first_names: str | None = None
    last_names: str | None = None
    full_name: str | None = None
    document_id: str | None = None
    profile_photo_url: str | None = None
    gender: str | None = None
    emails: list[str] | None = None
    phones: list[str] | None = None
    company_id: str | None = None
    job_title_category_id: str | None = None
    profession_id: str | None = None
    student_code: str | None = None
    status: StudentStatus | str | None = None


class StudentFilters(BaseModel):
    """Filtros y paginación de `GET /students`."""

    model_config = ConfigDict(use_enum_values=True)

    status: StudentStatus | str | None = None
    cohort: str | None = None
    search: str | None = None
    residence_country_id: str | None = None
    limit: int | None = DEFAULT_LIMIT
    offset: int | None = DEFAULT_OFFSET


class ImportRowError(BaseModel):
    """Error de una fila concreta del archivo importado."""

    model_config = ConfigDict(extra="allow")

    row: int
    field: str = ""
    value: str = ""
    message: str = ""


class ImportResult(BaseModel):
    """Resultado de `POST /students/import`.

    Contrato externo del backend: se modela de forma laxa y se conservan
    los campos que no conocemos.
    """

    model_config = ConfigDict(extra="allow")

    total_rows: int = 0
    created: int = 0
    errors: list[ImportRowError] = Field(default_factory=list)
