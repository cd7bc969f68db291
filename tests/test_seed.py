import pytest
from click.testing import CliRunner
from pydantic import ValidationError

import crud
import models
import schemas
from records import RecordSourceError, load_advocates, load_database_advocates
from seed.advocates import ADVOCATE_DATA
from seed.cli import seed, seed_database


def test_seed_data_is_valid(seed_advocates):
    assert len(seed_advocates) == len(ADVOCATE_DATA) == 15
    assert {a.degree for a in seed_advocates} == {"MD", "PhD", "MSW"}
    assert all(len(str(a.phone_number)) == 10 for a in seed_advocates)
    assert all(a.specialties for a in seed_advocates)


def test_seed_collection_is_loaded_once(seed_advocates):
    assert load_advocates("seed") is seed_advocates


def test_unknown_record_source_is_an_error():
    with pytest.raises(RecordSourceError):
        load_advocates("spreadsheet")


def test_replace_advocates_inserts_seed_data(db_session, seed_advocates):
    rows = crud.replace_advocates(db_session, seed_advocates)

    assert len(rows) == 15
    assert all(row.id is not None for row in rows)
    assert crud.count_advocates(db_session) == 15


def test_replace_advocates_clears_existing_rows(db_session, seed_advocates, make_advocate):
    crud.replace_advocates(db_session, seed_advocates)
    crud.replace_advocates(db_session, [make_advocate(firstName="Only")])

    advocates = crud.get_advocates(db_session)
    assert [a.first_name for a in advocates] == ["Only"]


def test_database_records_round_trip_through_search_schema(session_factory, db_session, seed_advocates):
    crud.replace_advocates(db_session, seed_advocates)

    records = load_database_advocates(session_factory)

    assert len(records) == 15
    assert records[0].id is not None
    assert records[0].first_name == seed_advocates[0].first_name
    assert records[0].specialties == seed_advocates[0].specialties
    assert records[0].model_dump(by_alias=True)["phoneNumber"] == seed_advocates[0].phone_number


def test_database_failure_raises_record_source_error(sqlite_engine, session_factory):
    models.Base.metadata.drop_all(bind=sqlite_engine)

    with pytest.raises(RecordSourceError):
        load_database_advocates(session_factory)


def test_model_rejects_invalid_degree_and_phone():
    with pytest.raises(ValueError):
        models.Advocate(degree="DDS")
    with pytest.raises(ValueError):
        models.Advocate(phone_number=12345)
    with pytest.raises(ValueError):
        models.Advocate(years_of_experience=-1)


def test_schema_rejects_invalid_degree(make_advocate):
    with pytest.raises(ValidationError):
        make_advocate(degree="md")
    with pytest.raises(ValidationError):
        make_advocate(phoneNumber=123)


def test_to_dict_uses_wire_names(db_session, seed_advocates):
    row = crud.replace_advocates(db_session, seed_advocates[:1])[0]

    data = row.to_dict()

    assert data["firstName"] == seed_advocates[0].first_name
    assert data["yearsOfExperience"] == seed_advocates[0].years_of_experience
    assert schemas.Advocate.model_validate(data).city == seed_advocates[0].city


def test_to_dict_leaves_out_missing_timestamp():
    row = models.Advocate(
        first_name="Ada", last_name="Lovelace", city="London", degree="PhD",
        specialties=["ADHD"], years_of_experience=3, phone_number=5551234567,
    )

    data = row.to_dict()

    assert "createdAt" not in data
    assert data["specialties"] == ["ADHD"]


def test_seed_database_creates_table_and_inserts(sqlite_engine, session_factory):
    models.Base.metadata.drop_all(bind=sqlite_engine)

    assert seed_database(sqlite_engine) == 15

    session = session_factory()
    try:
        assert crud.count_advocates(session) == 15
    finally:
        session.close()


def test_seed_command_dry_run():
    result = CliRunner().invoke(seed, ["--dry-run"])

    assert result.exit_code == 0
    assert "15 seed advocates are valid" in result.output


def test_seed_command_writes_database(tmp_path):
    url = f"sqlite:///{tmp_path / 'advocates.db'}"

    result = CliRunner().invoke(seed, ["--database-url", url])

    assert result.exit_code == 0, result.output
    assert "Inserted 15 advocates" in result.output


def test_seed_command_fails_for_unreachable_database(tmp_path):
    url = f"sqlite:///{tmp_path / 'missing' / 'advocates.db'}"

    result = CliRunner().invoke(seed, ["--database-url", url])

    assert result.exit_code != 0
    assert "Could not connect" in result.output
