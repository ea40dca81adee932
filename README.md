# uczelnia

A small console system for a university, built on SQLite. It stores user
accounts with a role (`admin`, `student` or `prowadzacy`) and departments, and
lets users log in with an album number and a password. An admin can add a user
or a department from a text menu.

The program's messages are in Polish.

## Installation

```
pip install .
```

## Running

```
uczelnia [database]
```

`database` is the path of the SQLite file to use; it defaults to
`baza_uczelnia.db` in the current directory. The file and all of its tables are
created if they do not exist yet. A welcome screen and a start menu follow:

```
1. Zaloguj sie
2. Wyjdz
```

Choosing `1` asks for an album number and a password. A wrong pair prints an
error and shows the start menu again. After an admin logs in, the admin menu
offers:

```
1. Dodaj uzytkownika
2. Dodaj wydzial
3. Wyloguj
```

The program ends after the admin has made one choice in this menu, after any
other user has logged in, or when `2` is chosen in the start menu. Ctrl-C or the
end of input also ends it. If the database cannot be opened, the error is
printed and the command exits with status 1.

## Using it from Python

```python
from uczelnia.database import Database

with Database("baza_uczelnia.db") as db:
    password = "password"
    db.add_user(1001, "Anna", password, "admin")
    db.add_department("Wydzial Informatyki")
    user = db.login(1001, password)
    print(user.name, user.role)
```

When used as a context manager, `Database` connects and creates the tables on
entry, and it closes the connection on exit. Without a `with` block, call
`initialize()` first and `close()` when you are done.

- `Database.add_user(album_number, name, password, role)` and
  `Database.add_department(name)` insert a row and return its id.
- `Database.login(album_number, password)` returns an `Admin`, a `Student` or a
  `Lecturer` (from `uczelnia.models`), or `None` if no account matches.
- `uczelnia.database.DatabaseError` is raised when the file cannot be opened,
  when a query fails (for example a duplicate album number or a role outside the
  three allowed), or when the database is used before it is connected.

`uczelnia.models` holds the `Role` enum, the frozen `User` dataclass and its
subclasses, and `user_for_role(user_id, album_number, name, password, role)`.
That function builds the matching subclass and raises `ValueError` for an
unknown role.

The menus are in `uczelnia.console.Console(db, input_func, output)`. It reads
each answer by calling `input_func` and writes to the `output` stream; these
default to `input` and standard output. This lets you drive it from code:

```python
import io
from uczelnia.console import Console

answers = iter(["2"])
out = io.StringIO()
Console(db, lambda: next(answers), out).show_start_menu()
```

## What it does not do

- Students and lecturers can log in, but they get no menu of their own.
- The database also has tables for courses, course members, course content and
  assignments. Nothing in the package reads or writes them.
- Passwords are stored and compared as plain text.

## Tests

```
pip install .[test]
pytest
```