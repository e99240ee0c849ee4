"""HTTP handlers for the people API."""

from __future__ import annotations

import json
import re
from typing import Any

from flask import Flask, Response, jsonify, request

from peopleapi.model import ValidationError, parse_input_person
from peopleapi.service import PeopleService

_MAX_ID = 2**32 - 1
_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


def _error(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": message}), status


def _parse_id(raw: str) -> int | None:
    if not _UNSIGNED.fullmatch(raw):
        return None
    value = int(raw)
    return value if value <= _MAX_ID else None


def _to_int(raw: str) -> int:
    """Parse a query integer, yielding 0 for anything malformed."""
    return int(raw) if _SIGNED.fullmatch(raw) else 0


def _read_json() -> Any:
    raw = request.get_data(cache=True)
    if not raw.strip():
        raise ValidationError("EOF")
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc


class PeopleHandler:
    """Translates HTTP requests into people service calls."""

    def __init__(self, service: PeopleService):
        self.service = service

    def register_routes(self, app: Flask) -> None:
        """Attach the people routes to the application."""
        app.add_url_rule("/api/people", "add_person", self.add_person, methods=["POST"])
        app.add_url_rule("/api/people", "get_people", self.get_people, methods=["GET"])
        app.add_url_rule(
            "/api/people/<person_id>", "update_person", self.update_person, methods=["PUT"]
        )
        app.add_url_rule(
            "/api/people/<person_id>", "delete_person", self.delete_person, methods=["DELETE"]
        )

    def add_person(self):
        """Create an enriched person from the JSON body."""
        try:
            input_person = parse_input_person(_read_json())
        except ValidationError as exc:
            return _error(str(exc), 400)
        try:
            person = self.service.add_person(input_person)
        except Exception as exc:
            return _error(str(exc), 500)
        return jsonify(person.to_dict()), 201

    def get_people(self):
        """List people filtered by name and surname, one page at a time."""
        page = _to_int(request.args.get("page", "1"))
        limit = _to_int(request.args.get("limit", "10"))
        filters = {
            key: value
            for key in ("name", "surname")
            if (value := request.args.get(key, ""))
        }
        try:
            people = self.service.get_people(filters, page, limit)
        except Exception as exc:
            return _error(str(exc), 500)
        return jsonify([person.to_dict() for person in people]), 200

    def update_person(self, person_id: str):
        """Apply the JSON body's fields to the person with the given id."""
        parsed_id = _parse_id(person_id)
        if parsed_id is None:
            return _error("invalid ID", 400)
        try:
            updates = _read_json()
        except ValidationError as exc:
            return _error(str(exc), 400)
        if updates is None:
            updates = {}
        if not isinstance(updates, dict):
            return _error("request body must be a JSON object", 400)
        try:
            person = self.service.update_person(parsed_id, updates)
        except Exception as exc:
            return _error(str(exc), 500)
        return jsonify(person.to_dict()), 200

    def delete_person(self, person_id: str):
        """Delete the person with the given id."""
        parsed_id = _parse_id(person_id)
        if parsed_id is None:
            return _error("invalid ID", 400)
        try:
            self.service.delete_person(parsed_id)
        except Exception as exc:
            return _error(str(exc), 500)
        return Response(status=204)


def create_app(service: PeopleService) -> Flask:
    """Build a Flask application serving the people API."""
    app = Flask("peopleapi")
    PeopleHandler(service).register_routes(app)
    return app