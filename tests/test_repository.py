import pytest
from sqlalchemy import create_engine, inspect

from peopleapi.config import DBConfig
from peopleapi.model import Person
from peopleapi.repository import (
    PeopleRepository,
    PersonNotFoundError,
    SqlPeopleRepository,
    new_people_repository,
    run_migrations,
)


@pytest.fixture
def repo(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'people.db'}")
    run_migrations(engine)
    return SqlPeopleRepository(engine)


def _add(repo, name, surname="Ivanov"):
    return repo.create(Person(name=name, surname=surname))


def test_run_migrations_creates_people_table(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'm.db'}")
    run_migrations(engine)
    run_migrations(engine)
    assert "people" in inspect(engine).get_table_names()


def test_create_assigns_id_and_time(repo):
    person = _add(repo, "Anna")
    assert isinstance(person.id, int)
    assert person.created_at is not None
    other = _add(repo, "Boris")
    assert other.id > person.id


def test_find_by_id_round_trip(repo):
    created = repo.create(
        Person(name="Anna", surname="Ivanova", patronymic="P", age=30, gender="female", national="RU")
    )
    found = repo.find_by_id(created.id)
    assert (found.name, found.surname, found.patronymic) == ("Anna", "Ivanova", "P")
    assert (found.age, found.gender, found.national) == (30, "female", "RU")
    assert found.id == created.id


def test_find_by_id_missing(repo):
    with pytest.raises(PersonNotFoundError, match="record not found"):
        repo.find_by_id(999)


def test_find_all_paginates_in_id_order(repo):
    people = [_add(repo, f"name{i}") for i in range(5)]
    first = repo.find_all({}, 1, 2)
    second = repo.find_all({}, 2, 2)
    third = repo.find_all({}, 3, 2)
    assert [p.id for p in first] == [people[0].id, people[1].id]
    assert [p.id for p in second] == [people[2].id, people[3].id]
    assert [p.id for p in third] == [people[4].id]


def test_find_all_negative_limit_returns_everything(repo):
    for i in range(4):
        _add(repo, f"name{i}")
    assert len(repo.find_all({}, 1, -1)) == 4


def test_find_all_page_zero_has_no_offset(repo):
    people = [_add(repo, f"name{i}") for i in range(3)]
    assert [p.id for p in repo.find_all({}, 0, 2)] == [people[0].id, people[1].id]


def test_find_all_filters(repo):
    _add(repo, "Anna", "Ivanova")
    _add(repo, "Anna", "Petrova")
    _add(repo, "Boris", "Ivanova")
    assert {p.surname for p in repo.find_all({"name": "Anna"}, 1, 10)} == {"Ivanova", "Petrova"}
    both = repo.find_all({"name": "Anna", "surname": "Petrova"}, 1, 10)
    assert [(p.name, p.surname) for p in both] == [("Anna", "Petrova")]


def test_find_all_unknown_filter(repo):
    with pytest.raises(ValueError, match="unknown filter"):
        repo.find_all({"shoe_size": "42"}, 1, 10)


def test_update_saves_fields(repo):
    person = _add(repo, "Anna")
    person.surname = "Smirnova"
    person.age = 28
    repo.update(person)
    found = repo.find_by_id(person.id)
    assert (found.surname, found.age) == ("Smirnova", 28)


def test_update_missing_id_inserts(repo):
    repo.update(Person(name="Ghost", surname="Row", id=50))
    assert repo.find_by_id(50).name == "Ghost"


def test_update_without_id_creates(repo):
    person = repo.update(Person(name="Fresh"))
    assert repo.find_by_id(person.id).name == "Fresh"


def test_delete(repo):
    person = _add(repo, "Anna")
    repo.delete(person.id)
    with pytest.raises(PersonNotFoundError):
        repo.find_by_id(person.id)
    repo.delete(person.id)
    assert repo.find_all({}, 1, 10) == []


def test_new_people_repository_from_config(tmp_path):
    db = DBConfig(driver="sqlite", name=str(tmp_path / "cfg.db"))
    repo = new_people_repository(db)
    run_migrations(repo.engine)
    person = repo.create(Person(name="Anna", surname="Ivanova"))
    assert repo.find_by_id(person.id).surname == "Ivanova"


def test_repository_interface_is_abstract():
    with pytest.raises(TypeError):
        PeopleRepository()