# peopleapi

A small HTTP service that keeps a list of people. When a person is added, the
service asks three public name-statistics services (agify, genderize and
nationalize) for an estimated age, gender and most likely nationality for the
first name, and stores the enriched record in a SQL database through
SQLAlchemy.

## Installation

```
pip install .
```

The default database driver name is `postgresql`. SQLAlchemy needs a
PostgreSQL driver for that, and this package does not install one. Install
one yourself, or pick another backend with `DB_DRIVER` (see below).

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Configuration

Settings come from environment variables. At start-up the command reads an
env file as well. Values already set in the process environment win over
values in the file.

| Variable      | Meaning                                                    |
|---------------|------------------------------------------------------------|
| `PORT`        | Port the HTTP server listens on (all interfaces)           |
| `DB_HOST`     | Database host                                              |
| `DB_PORT`     | Database port                                              |
| `DB_USER`     | Database user                                              |
| `DB_PASSWORD` | Database user's password                                   |
| `DB_NAME`     | Database name (for SQLite, the file path)                  |
| `DB_DRIVER`   | SQLAlchemy driver name, default `postgresql`               |

Empty settings are left out of the database URL. If `PORT` is empty, the
server is given port `0`.

Example `.env`:

```
PORT=8080
DB_HOST=localhost
DB_PORT=5432
DB_USER=user
DB_PASSWORD=password
DB_NAME=people
```

A local SQLite database needs only:

```
PORT=8080
DB_DRIVER=sqlite
DB_NAME=people.db
```

## Running

```
peopleapi
peopleapi --env-file path/to/settings.env
```

`--env-file` defaults to `.env` in the working directory. If that file does
not exist, the command logs `Error loading .env file` and exits with status 1.
At start-up the `people` table is created if it does not exist yet. Then the
Flask development server starts on the configured port. The command also
exits with status 1 if it cannot connect or create the table, if `PORT` is
not a number, or if the server fails.

## HTTP API

Request and response bodies are JSON. Errors are returned as
`{"error": "<message>"}`.

### `POST /api/people`

Adds a person. `name` and `surname` are required and must be non-empty
strings. `patronymic` is optional.

```json
{"name": "Dmitriy", "surname": "Ushakov", "patronymic": "Vasilevich"}
```

The response is `201 Created` with the stored, enriched person:

```json
{
  "id": 1,
  "name": "Dmitriy",
  "surname": "Ushakov",
  "patronymic": "Vasilevich",
  "age": 42,
  "gender": "male",
  "national": "UA",
  "created_at": "2024-01-01T12:00:00+00:00"
}
```

If the services return no age, `age` is `0`. If they return no gender,
`gender` is empty. If they return no country, `national` is `"unknown"`.

A missing, malformed or invalid body gives `400`. A failure of enrichment or
storage gives `500`.

### `GET /api/people`

Lists people ordered by id. Query parameters:

- `name`: exact match on first name
- `surname`: exact match on surname
- `page`: page number, default `1`
- `limit`: items per page, default `10`; a negative limit returns all rows

A `page` or `limit` that is not an integer counts as `0`.

### `PUT /api/people/<id>`

Updates a person. The body is an object that may hold any of these keys:

- `name`, `surname`, `patronymic`, `gender`: strings
- `nationality`: a string, stored as `national`
- `age`: a number or a string of digits

Other keys are ignored. The response is `200` with the updated person.

An id that is not a non-negative integer below 2^32 gives `400`, and so does
a body that is not a JSON object. An unknown id gives `500` with
`record not found`. A value of the wrong type also gives `500`.

### `DELETE /api/people/<id>`

Deletes a person and responds `204 No Content`. Deleting an id that does not
exist also succeeds. An invalid id gives `400`.

### `GET /swagger/doc.json`

Returns the Swagger 2.0 description of the API above.

## Using it as a library

The pieces can be put together in code:

```python
from sqlalchemy import create_engine

from peopleapi.enrichment import ApiEnricher
from peopleapi.handler import create_app
from peopleapi.repository import SqlPeopleRepository, run_migrations
from peopleapi.service import PeopleService

engine = create_engine("sqlite:///people.db")
run_migrations(engine)
app = create_app(PeopleService(SqlPeopleRepository(engine), ApiEnricher()))
app.run(port=8080)
```

Alternatively, `peopleapi.main.build_app(config)` builds the same application
from a `peopleapi.config.Config`, such as the one returned by
`peopleapi.config.load_config()`, and also adds the Swagger route.

Other entry points:

- `peopleapi.enrichment.Enricher`: the abstract base class for enrichers.
  You can supply your own in place of `ApiEnricher`.
- `peopleapi.repository.PeopleRepository`: the abstract base class for
  storage backends.
- `peopleapi.docs.swagger_spec(host, base_path)`: returns the Swagger
  document as a dictionary.

## What it does not do

- There is no Swagger UI. Only the JSON document is served.
- There are no versioned schema migrations. Start-up creates the `people`
  table if it is missing, and never alters an existing table.
- There is no authentication. The server is Flask's development server.