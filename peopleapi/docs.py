"""Swagger 2.0 description of the people HTTP API."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

_JSON = "application/json"
_TAG = "people"

_INPUT_PERSON_FIELDS = {"name": "string", "surname": "string", "patronymic": "string"}
_PERSON_FIELDS = {
    "id": "integer",
    "name": "string",
    "surname": "string",
    "patronymic": "string",
    "age": "integer",
    "gender": "string",
    "national": "string",
    "created_at": "string",
}


def _ref(definition: str) -> dict[str, Any]:
    return {"$ref": f"#/definitions/{definition}"}


def _error_schema() -> dict[str, Any]:
    return {"type": "object", "additionalProperties": {"type": "string"}}


def _response(status: int, schema: dict[str, Any] | None = None) -> dict[str, Any]:
    response: dict[str, Any] = {"description": HTTPStatus(status).phrase}
    if schema is not None:
        response["schema"] = schema
    return response


def _responses(
    success: int, schema: dict[str, Any] | None, *errors: int
) -> dict[str, Any]:
    result = {str(success): _response(success, schema)}
    result.update({str(status): _response(status, _error_schema()) for status in errors})
    return result


def _param(
    name: str,
    location: str,
    description: str,
    kind: str | None = None,
    *,
    required: bool = False,
    default: int | None = None,
    schema: dict[str, Any] | None = None,
) -> dict[str, Any]:
    param: dict[str, Any] = {}
    if kind is not None:
        param["type"] = kind
    if default is not None:
        param["default"] = default
    param.update(description=description, name=name)
    param["in"] = location
    if required:
        param["required"] = True
    if schema is not None:
        param["schema"] = schema
    return param


def _operation(
    summary: str,
    description: str,
    parameters: list[dict[str, Any]],
    responses: dict[str, Any],
    *,
    consumes: bool = False,
    produces: bool = True,
) -> dict[str, Any]:
    operation: dict[str, Any] = {"description": description}
    if consumes:
        operation["consumes"] = [_JSON]
    if produces:
        operation["produces"] = [_JSON]
    operation.update(
        tags=[_TAG], summary=summary, parameters=parameters, responses=responses
    )
    return operation


def _person_id() -> dict[str, Any]:
    return _param("id", "path", "Person ID", "integer", required=True)


def _object(fields: dict[str, str], required: tuple[str, ...] = ()) -> dict[str, Any]:
    definition: dict[str, Any] = {"type": "object"}
    if required:
        definition["required"] = list(required)
    definition["properties"] = {name: {"type": fields[name]} for name in sorted(fields)}
    return definition


def _paths() -> dict[str, Any]:
    listing = _operation(
        "Get people",
        "Get people with filtering and pagination",
        [
            _param("name", "query", "Filter by name", "string"),
            _param("surname", "query", "Filter by surname", "string"),
            _param("page", "query", "Page number", "integer", default=1),
            _param("limit", "query", "Items per page", "integer", default=10),
        ],
        _responses(200, {"type": "array", "items": _ref("model.Person")}, 500),
    )
    creation = _operation(
        "Add a new person",
        "Add a new person with enrichment",
        [
            _param(
                "input", "body", "Person data",
                required=True, schema=_ref("model.InputPerson"),
            )
        ],
        _responses(201, _ref("model.Person"), 400, 500),
        consumes=True,
    )
    update = _operation(
        "Update a person",
        "Update person data",
        [
            _person_id(),
            _param(
                "input", "body", "Update data",
                required=True,
                schema={"type": "object", "additionalProperties": True},
            ),
        ],
        _responses(200, _ref("model.Person"), 400, 404, 500),
        consumes=True,
    )
    deletion = _operation(
        "Delete a person",
        "Delete a person by ID",
        [_person_id()],
        _responses(204, None, 400, 500),
        produces=False,
    )
    return {
        "/api/people": {"get": listing, "post": creation},
        "/api/people/{id}": {"put": update, "delete": deletion},
    }


def swagger_spec(host: str = "", base_path: str = "") -> dict[str, Any]:
    """Return the Swagger document describing the people API."""
    return {
        "schemes": [],
        "swagger": "2.0",
        "info": {"description": "", "title": "", "contact": {}, "version": ""},
        "host": host,
        "basePath": base_path,
        "paths": _paths(),
        "definitions": {
            "model.InputPerson": _object(_INPUT_PERSON_FIELDS, ("name", "surname")),
            "model.Person": _object(_PERSON_FIELDS),
        },
    }