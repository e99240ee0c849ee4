"""Enrichment of people with age, gender and nationality from public APIs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import requests

from peopleapi.model import Person

AGIFY_URL = "https://api.agify.io/"
GENDERIZE_URL = "https://api.genderize.io/"
NATIONALIZE_URL = "https://api.nationalize.io/"
UNKNOWN_NATIONALITY = "unknown"


class Enricher(ABC):
    """Something that fills in derived attributes of a person."""

    @abstractmethod
    def enrich(self, person: Person) -> None:
        """Fill in the person's derived attributes in place."""


class ApiEnricher(Enricher):
    """Enricher backed by the agify, genderize and nationalize services."""

    def __init__(self, session: requests.Session | None = None, timeout: float = 10.0):
        self._session = session or requests.Session()
        self._timeout = timeout

    def enrich(self, person: Person) -> None:
        """Set age, gender and nationality on the person, raising on failure."""
        person.age = self._age(person.name)
        person.gender = self._gender(person.name)
        person.national = self._nationality(person.name)

    def _fetch(self, url: str, name: str) -> dict[str, Any]:
        response = self._session.get(url, params={"name": name}, timeout=self._timeout)
        body = response.json()
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise ValueError(f"unexpected response from {url}")
        return body

    def _age(self, name: str) -> int:
        age = self._fetch(AGIFY_URL, name).get("age")
        if age is None:
            return 0
        if isinstance(age, bool) or not isinstance(age, int):
            raise ValueError(f"unexpected age value: {age!r}")
        return age

    def _gender(self, name: str) -> str:
        gender = self._fetch(GENDERIZE_URL, name).get("gender")
        if gender is None:
            return ""
        if not isinstance(gender, str):
            raise ValueError(f"unexpected gender value: {gender!r}")
        return gender

    def _nationality(self, name: str) -> str:
        countries = self._fetch(NATIONALIZE_URL, name).get("country") or []
        if not isinstance(countries, list):
            raise ValueError(f"unexpected country value: {countries!r}")
        if not countries:
            return UNKNOWN_NATIONALITY
        first = countries[0]
        if not isinstance(first, dict):
            raise ValueError(f"unexpected country entry: {first!r}")
        country_id = first.get("country_id") or ""
        if not isinstance(country_id, str):
            raise ValueError(f"unexpected country id: {country_id!r}")
        return country_id