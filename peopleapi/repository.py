"""Storage of people in a relational database."""

from __future__ import annotations

import dataclasses
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine

from peopleapi.config import DBConfig
from peopleapi.model import Person

logger = logging.getLogger(__name__)

metadata = MetaData()

people_table = Table(
    "people",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False, default=""),
    Column("surname", String, nullable=False, default=""),
    Column("patronymic", String, nullable=False, default=""),
    Column("age", Integer, nullable=False, default=0),
    Column("gender", String, nullable=False, default=""),
    Column("national", String, nullable=False, default=""),
    Column("created_at", DateTime(timezone=True)),
)


class PersonNotFoundError(LookupError):
    """Raised when no person has the requested id."""

    def __init__(self, person_id: int):
        super().__init__("record not found")
        self.person_id = person_id


class PeopleRepository(ABC):
    """Persistent collection of people."""

    @abstractmethod
    def create(self, person: Person) -> Person:
        """Store a new person, setting its id and creation time."""

    @abstractmethod
    def find_all(self, filters: Mapping[str, str], page: int, limit: int) -> list[Person]:
        """Return one page of people whose fields equal the filter values."""

    @abstractmethod
    def find_by_id(self, person_id: int) -> Person:
        """Return the person with the given id."""

    @abstractmethod
    def update(self, person: Person) -> Person:
        """Save every field of the person."""

    @abstractmethod
    def delete(self, person_id: int) -> None:
        """Remove the person with the given id, if present."""


def _row_values(person: Person) -> dict[str, Any]:
    return dataclasses.asdict(person)


class SqlPeopleRepository(PeopleRepository):
    """People repository backed by an SQLAlchemy engine."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def create(self, person: Person) -> Person:
        if person.created_at is None:
            person.created_at = datetime.now(timezone.utc)
        values = _row_values(person)
        if person.id is None:
            del values["id"]
        with self.engine.begin() as conn:
            result = conn.execute(insert(people_table).values(**values))
        person.id = result.inserted_primary_key[0]
        return person

    def find_all(self, filters: Mapping[str, str], page: int, limit: int) -> list[Person]:
        unknown = sorted(set(filters) - set(people_table.c.keys()))
        if unknown:
            raise ValueError(f"unknown filter column: {', '.join(unknown)}")
        query = select(people_table).order_by(people_table.c.id)
        for column, value in filters.items():
            query = query.where(people_table.c[column] == value)
        if limit >= 0:
            query = query.limit(limit)
        offset = limit * (page - 1)
        if offset > 0:
            query = query.offset(offset)
        with self.engine.connect() as conn:
            return [Person(**row._mapping) for row in conn.execute(query)]

    def find_by_id(self, person_id: int) -> Person:
        query = select(people_table).where(people_table.c.id == person_id)
        with self.engine.connect() as conn:
            row = conn.execute(query).first()
        if row is None:
            raise PersonNotFoundError(person_id)
        return Person(**row._mapping)

    def update(self, person: Person) -> Person:
        if person.id is None:
            return self.create(person)
        if person.created_at is None:
            person.created_at = datetime.now(timezone.utc)
        values = _row_values(person)
        del values["id"]
        with self.engine.begin() as conn:
            result = conn.execute(
                update(people_table).where(people_table.c.id == person.id).values(**values)
            )
            if result.rowcount == 0:
                conn.execute(insert(people_table).values(id=person.id, **values))
        return person

    def delete(self, person_id: int) -> None:
        with self.engine.begin() as conn:
            conn.execute(delete(people_table).where(people_table.c.id == person_id))


def new_people_repository(db_config: DBConfig) -> SqlPeopleRepository:
    """Create a repository connected to the configured database."""
    return SqlPeopleRepository(create_engine(db_config.url()))


def run_migrations(engine: Engine) -> None:
    """Bring the database schema up to date."""
    metadata.create_all(engine)
    logger.info("Database migrated")