"""SQLite storage for users, departments and courses."""

from __future__ import annotations

import os
import sqlite3

from .models import User, user_for_role

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS Uzytkownik (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        nrAlbum INTEGER UNIQUE,
        imie TEXT,
        haslo TEXT,
        rola TEXT CHECK(rola IN ('admin', 'prowadzacy', 'student'))
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS Wydzial (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        nazwa TEXT
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS WydzialUzytkownik (
        uzytkownik_id INTEGER,
        wydzial_id INTEGER,
        FOREIGN KEY (uzytkownik_id) REFERENCES Uzytkownik(id),
        FOREIGN KEY (wydzial_id) REFERENCES Wydzial(id)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS Kurs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        tytul TEXT,
        prowadzacy_id INTEGER,
        wydzial_id INTEGER,
        FOREIGN KEY (prowadzacy_id) REFERENCES Uzytkownik(id),
        FOREIGN KEY (wydzial_id) REFERENCES Wydzial(id)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS UczestnicyKursu (
        student_id INTEGER,
        kurs_id INTEGER,
        FOREIGN KEY (student_id) REFERENCES Uzytkownik(id),
        FOREIGN KEY (kurs_id) REFERENCES Kurs(id)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS Zadania (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        kurs_id INTEGER,
        student_id INTEGER,
        file_path TEXT,
        ocena INTEGER,
        FOREIGN KEY (kurs_id) REFERENCES Kurs(id),
        FOREIGN KEY (student_id) REFERENCES Uzytkownik(id)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS TrescKursu (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        kurs_id INTEGER,
        tytul TEXT,
        zawartosc TEXT,
        FOREIGN KEY (kurs_id) REFERENCES Kurs(id)
    );
    """,
)


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a query fails."""


class Database:
    """Connection to the university database file."""

    def __init__(self, path):
        self.path = os.fspath(path)
        self._conn: sqlite3.Connection | None = None

    def __enter__(self) -> "Database":
        self.initialize()
        return self

    def __exit__(self, *args) -> None:
        self.close()

    @property
    def connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> None:
        """Open the database file; does nothing if already open."""
        if self._conn is not None:
            return
        try:
            self._conn = sqlite3.connect(self.path, isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Blad polaczenia z baza: {exc}") from exc

    def initialize(self) -> None:
        """Connect and make sure every table exists."""
        self.connect()
        self.create_tables()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError("brak polaczenia z baza danych")
        return self._conn

    def execute(self, sql: str) -> None:
        """Run one or more SQL statements."""
        conn = self._connection()
        try:
            conn.executescript(sql)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Blad SQL: {exc}") from exc

    def create_tables(self) -> None:
        for statement in _SCHEMA:
            self.execute(statement)

    def _insert(self, sql: str, params: tuple) -> int:
        conn = self._connection()
        try:
            cursor = conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Blad wykonania zapytania: {exc}") from exc
        return cursor.lastrowid

    def add_user(self, album_number, name, password, role) -> int:
        """Insert a user and return its id."""
        return self._insert(
            "INSERT INTO Uzytkownik (nrAlbum, imie, haslo, rola) VALUES (?, ?, ?, ?);",
            (album_number, name, password, str(role)),
        )

    def add_department(self, name) -> int:
        """Insert a department and return its id."""
        return self._insert("INSERT INTO Wydzial (nazwa) VALUES (?);", (name,))

    def login(self, album_number, password) -> User | None:
        """Return the user with these credentials, or None if none matches."""
        conn = self._connection()
        try:
            row = conn.execute(
                "SELECT id, imie, rola FROM Uzytkownik WHERE nrAlbum = ? AND haslo = ?;",
                (album_number, password),
            ).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(f"Blad przygotowania zapytania SQL: {exc}") from exc
        if row is None:
            return None
        user_id, name, role = row
        try:
            return user_for_role(user_id, album_number, name, password, role)
        except ValueError:
            return None