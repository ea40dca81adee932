"""Text menus of the university system."""

from __future__ import annotations

import argparse
import sys

from .database import Database, DatabaseError
from .models import Role, User

DEFAULT_DATABASE = "baza_uczelnia.db"
_INVALID_CHOICE = "Niepoprawny wybor, sprobuj ponownie."
_ASK_HASLO = "Podaj haslo: "


class Console:
    """Interactive menus reading from ``input_func`` and writing to ``output``."""

    def __init__(self, db, input_func=None, output=None):
        self.db: Database = db
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout

    def print_line(self, msg) -> None:
        print(msg, file=self._output)

    def _prompt(self, text: str) -> str:
        self._output.write(text)
        self._output.flush()
        return self._input()

    def _read_token(self, text: str) -> str:
        words = self._prompt(text).split()
        return words[0] if words else ""

    def _read_int(self, text: str) -> int | None:
        try:
            return int(self._read_token(text))
        except ValueError:
            return None

    def show_welcome_message(self) -> None:
        self.print_line("=============================")
        self.print_line(" Witaj w systemie uczelni!")
        self.print_line("=============================")

    def show_start_menu(self) -> User | None:
        """Offer login or exit; return the logged-in user, or None on exit."""
        while True:
            self.print_line("1. Zaloguj sie")
            self.print_line("2. Wyjdz")
            choice = self._read_int("Wybierz opcje: ")
            if choice == 1:
                self.print_line("Logowanie...")
                user = self.show_login_prompt()
                if user is not None:
                    return user
            elif choice == 2:
                self.print_line("Wyjscie z programu...")
                return None
            else:
                self.print_line(_INVALID_CHOICE)

    def show_login_prompt(self) -> User | None:
        """Ask for credentials; on success run the user's menu and return the user."""
        album_number = self._read_int("Podaj Nr albumu: ")
        entered = self._read_token(_ASK_HASLO)
        user = None if album_number is None else self.db.login(album_number, entered)
        if user is None:
            self.show_login_failure()
            return None
        self.show_login_success(user.name, user.role)
        if user.role is Role.ADMIN:
            self.show_admin_menu()
        return user

    def show_login_success(self, name, role) -> None:
        self.print_line(f"Witaj, {name} ({role})!")

    def show_login_failure(self) -> None:
        self.print_line("Niepoprawny nr albumu lub haslo!")

    def show_admin_menu(self) -> None:
        while True:
            self.print_line("\n--- MENU ADMINA ---")
            self.print_line("1. Dodaj uzytkownika")
            self.print_line("2. Dodaj wydzial")
            self.print_line("3. Wyloguj")
            choice = self._read_int("Wybierz opcje: ")
            if choice == 1:
                self.print_line("Dodawanie uzytkownika...")
                self.show_add_user_prompt()
                return
            if choice == 2:
                self.print_line("Dodawanie wydzialu...")
                self.show_add_department_prompt()
                return
            if choice == 3:
                self.print_line("Wylogowywanie...")
                return
            self.print_line(_INVALID_CHOICE)

    def show_add_user_prompt(self) -> bool:
        """Ask for a new user's details and store them; return whether it worked."""
        name = self._prompt("Podaj imie: ")
        album_number = self._read_int("Podaj nr albumu: ")
        entered = self._read_token(_ASK_HASLO)
        role = self._read_token("Podaj role (admin/student/prowadzacy): ")
        added = False
        if album_number is not None:
            try:
                self.db.add_user(album_number, name, entered, role)
                added = True
            except DatabaseError as exc:
                print(exc, file=sys.stderr)
        if added:
            self.print_line("Uzytkownik dodany pomyslnie!")
        else:
            self.print_line("Nie udalo sie dodac uzytkownika!")
        return added

    def show_add_department_prompt(self) -> bool:
        """Ask for a department name and store it; return whether it worked."""
        name = self._prompt("Podaj nazwe wydzialu: ")
        try:
            self.db.add_department(name)
        except DatabaseError as exc:
            print(exc, file=sys.stderr)
            self.print_line("Nie udalo sie dodac wydzialu!")
            return False
        self.print_line("Wydzial dodany pomyslnie!")
        return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="uczelnia", description="University system console.")
    parser.add_argument("database", nargs="?", default=DEFAULT_DATABASE, help="database file")
    args = parser.parse_args(argv)

    db = Database(args.database)
    try:
        db.initialize()
    except DatabaseError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Polaczono z baza danych: {db.path}")
    print("Wszystkie tabele zostaly utworzone.")

    console = Console(db)
    try:
        console.show_welcome_message()
        console.show_start_menu()
    except (EOFError, KeyboardInterrupt):
        pass
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())