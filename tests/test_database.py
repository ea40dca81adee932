import sqlite3

import pytest

from uczelnia.database import Database, DatabaseError
from uczelnia.models import Admin, Lecturer, Role, Student

PASSWORD = "password"
OTHER_PASSWORD = "secret"


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "test.db")
    database.initialize()
    yield database
    database.close()


def _table_names(path):
    with sqlite3.connect(path) as conn:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
    return {name for (name,) in rows}


def test_initialize_creates_all_tables(db):
    names = _table_names(db.path)
    expected = {
        "Uzytkownik",
        "Wydzial",
        "WydzialUzytkownik",
        "Kurs",
        "UczestnicyKursu",
        "Zadania",
        "TrescKursu",
    }
    assert expected <= names


def test_create_tables_is_repeatable(db):
    db.add_department("Informatyka")
    db.create_tables()
    with sqlite3.connect(db.path) as conn:
        assert conn.execute("SELECT COUNT(*) FROM Wydzial").fetchone()[0] == 1


@pytest.mark.parametrize(
    "role, cls",
    [("admin", Admin), ("student", Student), ("prowadzacy", Lecturer)],
)
def test_add_user_then_login(db, role, cls):
    user_id = db.add_user(500, "Kasia", PASSWORD, role)
    user = db.login(500, PASSWORD)
    assert isinstance(user, cls)
    assert user.user_id == user_id
    assert user.name == "Kasia"
    assert user.album_number == 500
    assert user.role == Role(role)


def test_add_user_accepts_role_enum(db):
    user_id = db.add_user(501, "Piotr", PASSWORD, Role.LECTURER)
    user = db.login(501, PASSWORD)
    assert type(user) is Lecturer
    assert user.role is Role.LECTURER
    assert user.user_id == user_id
    assert user.name == "Piotr"


def test_login_with_wrong_password_returns_none(db):
    db.add_user(500, "Kasia", PASSWORD, "student")
    assert db.login(500, OTHER_PASSWORD) is None
    assert db.login(999, PASSWORD) is None


def test_duplicate_album_number_rejected(db):
    db.add_user(500, "Kasia", PASSWORD, "student")
    with pytest.raises(DatabaseError):
        db.add_user(500, "Inna", PASSWORD, "student")


def test_invalid_role_rejected(db):
    with pytest.raises(DatabaseError):
        db.add_user(600, "Marek", PASSWORD, "dziekan")
    assert db.login(600, PASSWORD) is None


def test_add_department_ids_increase(db):
    first = db.add_department("Informatyka")
    second = db.add_department("Matematyka")
    assert second > first
    with sqlite3.connect(db.path) as conn:
        names = [n for (n,) in conn.execute("SELECT nazwa FROM Wydzial ORDER BY id")]
    assert names == ["Informatyka", "Matematyka"]


def test_execute_reports_sql_errors(db):
    with pytest.raises(DatabaseError):
        db.execute("SELECT * FROM NieMaTakiejTabeli;")


def test_operations_require_connection(tmp_path):
    database = Database(tmp_path / "x.db")
    with pytest.raises(DatabaseError):
        database.add_department("Fizyka")
    with pytest.raises(DatabaseError):
        database.login(1, PASSWORD)


def test_connect_failure_raises(tmp_path):
    database = Database(tmp_path / "missing" / "x.db")
    with pytest.raises(DatabaseError):
        database.connect()
    assert database.connected is False


def test_context_manager_initializes_and_closes(tmp_path):
    path = tmp_path / "ctx.db"
    with Database(path) as database:
        assert database.connected is True
        database.add_user(10, "Ala", PASSWORD, "admin")
    assert database.connected is False
    with Database(path) as reopened:
        assert isinstance(reopened.login(10, PASSWORD), Admin)