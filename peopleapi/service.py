"""Business operations on people."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from peopleapi.enrichment import Enricher
from peopleapi.model import InputPerson, Person
from peopleapi.repository import PeopleRepository

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

_STRING_FIELDS = {
    "name": "name",
    "surname": "surname",
    "patronymic": "patronymic",
    "gender": "gender",
    "nationality": "national",
}


class UpdateError(ValueError):
    """Raised when update data holds a value of the wrong kind."""


def _parse_age(value: Any) -> int:
    if isinstance(value, bool):
        raise UpdateError(f"unexpected type for age: {type(value).__name__}")
    if isinstance(value, str):
        if not _INTEGER.fullmatch(value):
            raise UpdateError(f"invalid age value: {value!r}")
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    raise UpdateError(f"unexpected type for age: {type(value).__name__}")


class PeopleService:
    """Creates, lists, updates and deletes people."""

    def __init__(self, repo: PeopleRepository, enricher: Enricher):
        self.repo = repo
        self.enricher = enricher

    def add_person(self, input_person: InputPerson) -> Person:
        """Enrich and store a new person."""
        person = Person(
            name=input_person.name,
            surname=input_person.surname,
            patronymic=input_person.patronymic,
        )
        try:
            self.enricher.enrich(person)
        except Exception as exc:
            logger.error("error enriching person: %s", exc)
            raise
        return self.repo.create(person)

    def get_people(self, filters: Mapping[str, str], page: int, limit: int) -> list[Person]:
        """Return one page of people matching the filters."""
        people = self.repo.find_all(filters, page, limit)
        logger.info("Fetched %d people", len(people))
        return people

    def update_person(self, person_id: int, updates: Mapping[str, Any]) -> Person:
        """Apply the given field updates to a stored person and save it."""
        person = self.repo.find_by_id(person_id)
        for key, value in updates.items():
            if key == "age":
                person.age = _parse_age(value)
            elif key in _STRING_FIELDS:
                if not isinstance(value, str):
                    raise UpdateError(f"unexpected type for {key}: {type(value).__name__}")
                setattr(person, _STRING_FIELDS[key], value)
        self.repo.update(person)
        logger.info("Updated person: ID=%d", person_id)
        return person

    def delete_person(self, person_id: int) -> None:
        """Delete a person by id."""
        self.repo.delete(person_id)
        logger.info("Deleted person: ID=%d", person_id)