from __future__ import annotations

import secrets
import string
from dataclasses import dataclass, field
from typing import Any, Dict

_ID_ALPHABET = string.ascii_letters + string.digits
ID_LENGTH = 20


def new_document_id() -> str:
    """Random opaque identifier, same shape as document-store auto ids."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))


@dataclass(frozen=True)
class Employee:
    """Domain entity: one employee document.

    ``fields`` holds name, surname, email, idNumber and any extra attributes;
    the identifier lives only in ``employee_id``.
    """

    employee_id: str
    fields: Dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> Dict[str, Any]:
        return {"id": self.employee_id, **{k: v for k, v in self.fields.items() if k != "id"}}
