"""Person records and validation of incoming person data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any


class ValidationError(ValueError):
    """Raised when request data does not describe a valid person."""


@dataclass
class Person:
    """A stored person, optionally enriched with age, gender and nationality."""

    name: str = ""
    surname: str = ""
    patronymic: str = ""
    age: int = 0
    gender: str = ""
    national: str = ""
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of the person."""
        return {
            "id": self.id,
            "name": self.name,
            "surname": self.surname,
            "patronymic": self.patronymic,
            "age": self.age,
            "gender": self.gender,
            "national": self.national,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class InputPerson:
    """Data supplied by a client to create a person."""

    name: str
    surname: str
    patronymic: str = ""


def _string_field(data: Mapping[str, Any], key: str, *, required: bool) -> str:
    value = data.get(key)
    if value is None:
        if required:
            raise ValidationError(f"field '{key}' is required")
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"field '{key}' must be a string")
    if required and not value:
        raise ValidationError(f"field '{key}' is required")
    return value


def parse_input_person(data: Any) -> InputPerson:
    """Validate a decoded JSON body and build an InputPerson from it."""
    if not isinstance(data, Mapping):
        raise ValidationError("request body must be a JSON object")
    return InputPerson(
        name=_string_field(data, "name", required=True),
        surname=_string_field(data, "surname", required=True),
        patronymic=_string_field(data, "patronymic", required=False),
    )