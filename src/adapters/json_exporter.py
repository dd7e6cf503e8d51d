"""Exportación JSON de estudiantes.

Por qué JSON:
- Interoperabilidad con hojas de cálculo/pipelines sin depender de la API.
- Formato estable (claves ordenadas) para poder versionar/diffear exports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.students import Student


def export_students_json(*, students: Iterable[Student], output_path: Path) -> Path:
    """Exporta estudiantes a un array JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [student.model_dump(mode="json", exclude_none=True) for student in students]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
