"""
employee_management.py
======================

This module implements a small employee management application: an
in-memory roster of employees with manual CSV persistence, driven by a
numbered console menu.  The roster fits comfortably in memory, so the design
favours plain Python objects and a single owned store instance over any kind
of database.

Sections implemented in this file:

* **Errors**
  – A small exception hierarchy rooted at `EmployeeManagementError`.  Every
    validation failure is a `ValueError` subclass so callers that already
    catch `ValueError` keep working.

* **Entity model**
  – The `Role` enumeration, the checked `role_from_selector` conversion and
    the `Employee` class, which enforces the age and join date rules at
    construction and mutation time.

* **Roster store**
  – The `EmployeeRoster` class owns the ordered collection of employees and
    provides CRUD, raises, filtering, sorting and payroll aggregation.  It
    reports expected conditions (duplicate id, unknown id) through return
    values rather than exceptions.

* **CSV codec**
  – `serialize` and `deserialize` convert between a roster and the fixed
    six column CSV format; `save_csv` and `read_csv` move that text to and
    from disk.

* **Interactive console**
  – `ConsoleShell` reads commands from a human and invokes the roster.  Its
    input and output functions are injectable so the menu can be scripted.

Run the module directly (or the ``employee-manager`` script) to start the
menu.  The roster is loaded from ``employees.csv`` in the working directory
when that file exists.
"""

from __future__ import annotations

import argparse
import csv
import datetime as _dt
import enum
import io
import logging
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

Clock = Callable[[], _dt.date]


###############################################################################
# Errors
###############################################################################

class EmployeeManagementError(ValueError):
    """Base class for all employee management failures."""


class InvalidAgeError(EmployeeManagementError):
    """An employee age was not above the minimum."""


class InvalidJoinDateError(EmployeeManagementError):
    """A join date lies after the current date."""


class InvalidSelectorError(EmployeeManagementError):
    """A numeric role selector was outside the menu range."""


class DuplicateIdError(EmployeeManagementError):
    """Two employees in one batch share an id."""


class RecordError(EmployeeManagementError):
    """A CSV record could not be turned into an employee.

    `line_number` is the 1-based line of the offending record, or None when
    the failure is not tied to a line (for example while encoding).
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class MalformedRecordError(RecordError):
    """A CSV record does not have the expected shape."""


class InvalidRoleError(RecordError):
    """A CSV record names a role that does not exist."""


class RecordParseError(RecordError):
    """A numeric or date field of a CSV record has invalid syntax."""


###############################################################################
# Entity model
###############################################################################

class Role(enum.Enum):
    INTERN = 1
    FRESHER = 2
    SENIOR = 3

    @classmethod
    def from_label(cls, label: str, line_number: Optional[int] = None) -> "Role":
        """Return the role whose name is exactly `label` (uppercase)."""
        try:
            return cls[label]
        except KeyError:
            raise InvalidRoleError(f"unknown role {label!r}", line_number) from None


@dataclass(frozen=True)
class RoleSelection:
    """Outcome of converting a menu selector into a `Role`.

    Exactly one of `role` and `error` is set.
    """

    role: Optional[Role] = None
    error: Optional[InvalidSelectorError] = None

    @property
    def ok(self) -> bool:
        return self.role is not None

    def unwrap(self) -> Role:
        if self.role is None:
            raise self.error or InvalidSelectorError("no role selected")
        return self.role


def role_from_selector(selector: int) -> RoleSelection:
    """Convert a menu selector (1, 2 or 3) into a role.

    >>> role_from_selector(3).role
    <Role.SENIOR: 3>
    >>> role_from_selector(7).ok
    False

    Only plain integers select a role; booleans and floats are rejected.
    """
    if not isinstance(selector, int) or isinstance(selector, bool):
        return RoleSelection(error=InvalidSelectorError(f"Bad role option: {selector!r}"))
    for role in Role:
        if role.value == selector:
            return RoleSelection(role=role)
    return RoleSelection(error=InvalidSelectorError(f"Bad role option: {selector}"))


class Employee:
    """One roster entry.

    The id and join date are fixed at construction.  Name, salary and role
    may be reassigned freely; age is checked on every assignment.

    Attributes
    ----------
    name : str
        Free-form display name.
    salary : float
        Current salary.  Changed directly or through `apply_raise`.
    role : Role
        Current role.

    Raises
    ------
    InvalidAgeError
        If `age` is not above `MINIMUM_AGE`.
    InvalidJoinDateError
        If `join_date` is after the date returned by `clock`.
    """

    # Ages must be strictly greater than this.
    MINIMUM_AGE = 18

    def __init__(
        self,
        employee_id: int,
        name: str,
        age: int,
        salary: float,
        role: Role,
        join_date: _dt.date,
        *,
        clock: Clock = _dt.date.today,
    ) -> None:
        self.check_age(age)
        if join_date > clock():
            raise InvalidJoinDateError(f"Join date {join_date.isoformat()} is in the future")
        self._id = employee_id
        self._join_date = join_date
        self._age = age
        self._clock = clock
        self.name = name
        self.salary = float(salary)
        self.role = role

    @classmethod
    def check_age(cls, age: int) -> None:
        if age <= cls.MINIMUM_AGE:
            raise InvalidAgeError(f"Age must be above {cls.MINIMUM_AGE}, got {age}")

    @property
    def id(self) -> int:
        return self._id

    @property
    def join_date(self) -> _dt.date:
        return self._join_date

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        self.check_age(value)
        self._age = value

    @property
    def experience_years(self) -> int:
        """Whole calendar years since joining, recomputed on every read."""
        today = self._clock()
        years = today.year - self._join_date.year
        if (today.month, today.day) < (self._join_date.month, self._join_date.day):
            years -= 1
        return years

    def apply_raise(self, pct: float) -> None:
        """Scale the salary by ``1 + pct / 100``.

        Negative percentages cut the salary.  No floor is applied, so a cut of
        100% or more leaves a zero or negative salary.
        """
        if pct <= -100:
            logger.warning("Raise of %s%% leaves employee %s with a salary of zero or less", pct, self._id)
        self.salary *= 1 + pct / 100.0

    def _fields(self) -> tuple:
        return (self._id, self.name, self._age, self.salary, self.role, self._join_date)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"Employee(id={self._id!r}, name={self.name!r}, age={self._age!r}, "
            f"salary={self.salary!r}, role={self.role.name}, join_date={self._join_date.isoformat()})"
        )


###############################################################################
# Roster store
###############################################################################

class SortOrder(enum.Enum):
    """Built-in orderings for `EmployeeRoster.sorted_view`."""

    NAME = 1
    SALARY = 2
    JOIN_DATE = 3

    @classmethod
    def from_selector(cls, selector: int) -> Optional["SortOrder"]:
        for order in cls:
            if order.value == selector:
                return order
        return None


_SORT_KEYS: Dict[SortOrder, tuple] = {
    SortOrder.NAME: (lambda e: e.name.casefold(), False),
    SortOrder.SALARY: (lambda e: e.salary, True),
    SortOrder.JOIN_DATE: (lambda e: e.join_date, False),
}


class EmployeeRoster:
    """Own the ordered collection of employees.

    Insertion order is preserved and ids are unique.  Query methods return new
    lists, so reordering or truncating a result never touches the roster;
    changes to an employee go through the `Employee` returned by `get_by_id`.

    The roster is not thread-safe.  Wrap the whole instance in one lock if it
    is ever shared between threads, since `add` checks and inserts in two
    steps.
    """

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._employees: List[Employee] = []
        self.replace_all(employees)

    # CRUD operations
    def add(self, employee: Employee) -> bool:
        """Append `employee` unless its id is taken.

        Parameters
        ----------
        employee : Employee
            The new entry.  Its id must not already be in the roster.

        Returns
        -------
        bool
            True if the employee was appended, False on a duplicate id, in
            which case the roster is unchanged.
        """
        if self.get_by_id(employee.id) is not None:
            logger.debug("Rejected duplicate employee id %s", employee.id)
            return False
        self._employees.append(employee)
        logger.debug("Added employee %s", employee.id)
        return True

    def remove(self, employee_id: int) -> bool:
        """Remove the employee with `employee_id`.  Returns whether one was removed."""
        for index, employee in enumerate(self._employees):
            if employee.id == employee_id:
                del self._employees[index]
                logger.debug("Removed employee %s", employee_id)
                return True
        return False

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with `employee_id`, or None if there is none."""
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        return None

    def employees(self) -> List[Employee]:
        """Return the employees in insertion order."""
        return list(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self.employees())

    # Salary changes
    def raise_salary(self, employee_id: int, pct: float) -> bool:
        """Apply a percentage raise to one employee.

        Parameters
        ----------
        employee_id : int
            Id of the employee to raise.
        pct : float
            Percentage change; negative values cut the salary.

        Returns
        -------
        bool
            False if no employee has `employee_id`.
        """
        employee = self.get_by_id(employee_id)
        if employee is None:
            return False
        employee.apply_raise(pct)
        return True

    def raise_all(self, pct: float, role: Optional[Role] = None) -> int:
        """Apply a percentage raise to every employee, or only to one role.

        Parameters
        ----------
        pct : float
            Percentage change; negative values cut salaries.
        role : Role, optional
            When given, only employees holding this role are raised.

        Returns
        -------
        int
            Number of employees whose salary changed.
        """
        affected = 0
        for employee in self._employees:
            if role is None or employee.role is role:
                employee.apply_raise(pct)
                affected += 1
        logger.info("Applied %s%% raise to %d employee(s)", pct, affected)
        return affected

    # Queries
    def filter(self, predicate: Callable[[Employee], bool]) -> List[Employee]:
        """Return the employees for which `predicate` is true, in roster order."""
        return [e for e in self._employees if predicate(e)]

    def by_role(self, role: Role) -> List[Employee]:
        """Return the employees currently holding `role`."""
        return self.filter(lambda e: e.role is role)

    def sorted_view(
        self,
        order: Union[SortOrder, Callable[[Employee], object]],
        reverse: bool = False,
    ) -> List[Employee]:
        """Return the employees sorted by `order`.

        `order` is either a `SortOrder` member, which carries its own
        direction, or a key function sorted ascending unless `reverse` is set.
        """
        if isinstance(order, SortOrder):
            key, reverse = _SORT_KEYS[order]
        else:
            key = order
        return sorted(self._employees, key=key, reverse=reverse)

    def total_payroll(self) -> float:
        """Sum of all salaries; 0.0 for an empty roster."""
        return float(sum(e.salary for e in self._employees))

    def average_salary_by_role(self) -> Dict[Role, float]:
        """Mean salary per role.  Every role is present; empty roles map to 0.0."""
        averages: Dict[Role, float] = {}
        for role in Role:
            salaries = [e.salary for e in self._employees if e.role is role]
            averages[role] = sum(salaries) / len(salaries) if salaries else 0.0
        return averages

    # Bulk replacement and persistence
    def replace_all(self, employees: Iterable[Employee]) -> None:
        """Replace the whole roster.

        Raises `DuplicateIdError` if two of `employees` share an id, in which
        case the current roster is left as it was.
        """
        incoming = list(employees)
        seen = set()
        for employee in incoming:
            if employee.id in seen:
                raise DuplicateIdError(f"Duplicate employee id {employee.id}")
            seen.add(employee.id)
        self._employees = incoming

    def load_csv(self, path: Path, clock: Clock = _dt.date.today) -> int:
        """Replace the roster with the contents of `path`.

        The whole file is parsed before anything is replaced, so a failure
        leaves the current roster untouched.  Returns the number loaded.
        """
        employees = read_csv(path, clock=clock)
        self.replace_all(employees)
        logger.info("Loaded %d employee(s) from %s", len(employees), path)
        return len(employees)

    def save_csv(self, path: Path) -> int:
        """Write the roster to `path`.  Returns the number written."""
        save_csv(self._employees, path)
        logger.info("Saved %d employee(s) to %s", len(self._employees), path)
        return len(self._employees)


###############################################################################
# CSV codec
###############################################################################

CSV_HEADER = "id,name,age,salary,role,joinDate"
_FIELD_COUNT = len(CSV_HEADER.split(","))
_UNENCODABLE = (",", "\n", "\r", "\x00")

# Plain numerals only: no whitespace, digit separators, nan or inf.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _encode(employee: Employee) -> List[str]:
    return [
        str(employee.id),
        employee.name,
        str(employee.age),
        repr(employee.salary),
        employee.role.name,
        employee.join_date.isoformat(),
    ]


def serialize(employees: Iterable[Employee]) -> str:
    """Encode `employees` as CSV text, header first, one line per employee.

    Fields are written verbatim without quoting or escaping.  A name that
    contains a comma, a line break or a NUL cannot be read back, so it raises
    `MalformedRecordError` instead.
    """
    lines = [CSV_HEADER]
    for employee in employees:
        bad = [c for c in _UNENCODABLE if c in employee.name]
        if bad:
            raise MalformedRecordError(
                f"name of employee {employee.id} contains unencodable character {bad[0]!r}"
            )
        lines.append(",".join(_encode(employee)))
    return "\n".join(lines) + "\n"


def _parse_int(raw: str, field_name: str, line_number: int) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise RecordParseError(f"invalid {field_name} {raw!r}", line_number)
    return int(raw)


def _parse_record(fields: Sequence[str], line_number: int, clock: Clock) -> Employee:
    if len(fields) < _FIELD_COUNT:
        raise MalformedRecordError(
            f"expected {_FIELD_COUNT} fields, found {len(fields)}", line_number
        )
    raw_id, name, raw_age, raw_salary, raw_role, raw_join = fields[:_FIELD_COUNT]
    employee_id = _parse_int(raw_id, "id", line_number)
    age = _parse_int(raw_age, "age", line_number)
    if not _FLOAT_PATTERN.fullmatch(raw_salary):
        raise RecordParseError(f"invalid salary {raw_salary!r}", line_number)
    salary = float(raw_salary)
    if not _DATE_PATTERN.fullmatch(raw_join):
        raise RecordParseError(f"invalid join date {raw_join!r}, expected YYYY-MM-DD", line_number)
    try:
        join_date = _dt.date.fromisoformat(raw_join)
    except ValueError as exc:
        raise RecordParseError(str(exc), line_number) from exc
    role = Role.from_label(raw_role, line_number)
    try:
        return Employee(employee_id, name, age, salary, role, join_date, clock=clock)
    except (InvalidAgeError, InvalidJoinDateError) as exc:
        raise type(exc)(f"line {line_number}: {exc}") from exc


def deserialize(text: str, clock: Clock = _dt.date.today) -> List[Employee]:
    """Decode CSV text produced by `serialize`.

    Lines end at ``\\n``, ``\\r\\n`` or ``\\r``.  The first line is discarded
    without being checked and blank lines are skipped.  Every other line must
    hold an employee; the first bad line raises and nothing is returned.
    """
    employees: List[Employee] = []
    reader = csv.reader(io.StringIO(text, newline=""), quoting=csv.QUOTE_NONE)
    try:
        next(reader, None)
        for fields in reader:
            if not ",".join(fields).strip():
                continue
            employees.append(_parse_record(fields, reader.line_num, clock))
    except csv.Error as exc:
        raise MalformedRecordError(str(exc), reader.line_num) from exc
    return employees


def read_csv(path: Path, clock: Clock = _dt.date.today) -> List[Employee]:
    """Read and decode the CSV file at `path`."""
    return deserialize(path.read_text(encoding="utf-8"), clock=clock)


def save_csv(employees: Iterable[Employee], path: Path) -> None:
    """Write `employees` to `path` as CSV.

    The text is written to a temporary sibling first and then renamed over
    `path`, so an existing file is either fully replaced or left alone.  The
    temporary file is removed if either step fails.  Parent directories are
    created when missing.
    """
    text = serialize(employees)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        with tmp_path.open("w", newline="", encoding="utf-8") as f:
            f.write(text)
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


###############################################################################
# Interactive console
###############################################################################

MENU = """\
+----------------------------------------+
| 1 Add      2 Remove    3 List all      |
| 4 Search   5 List role 6 Update        |
| 7 Raise    8 Payroll   9 Save CSV      |
|10 Load CSV 11 Sort     12 Exit         |
+----------------------------------------+"""

TABLE_HEADER = (
    "ID  | Name            |Ag|  Salary | Role    | Joined     |Exp\n"
    "----+-----------------+--+---------+---------+------------+---"
)

EXIT_CHOICE = 12


def format_employee(employee: Employee) -> str:
    """Render one table row for `employee`."""
    return (
        f"{employee.id:<3d} | {employee.name:<15s} | {employee.age:2d} | "
        f"{employee.salary:8.2f} | {employee.role.name:<7s} | "
        f"{employee.join_date.isoformat()} | {employee.experience_years:2d}y"
    )


@dataclass
class ShellConfig:
    """Settings for one console session."""

    csv_path: Path = field(default_factory=lambda: Path.cwd() / "employees.csv")
    autoload: bool = True


class ConsoleShell:
    """Numbered menu over an `EmployeeRoster`.

    `input_func` is called with a prompt and returns one line; `output`
    receives one string per printed line.  Both default to the console.
    """

    def __init__(
        self,
        roster: EmployeeRoster,
        config: Optional[ShellConfig] = None,
        *,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
        clock: Clock = _dt.date.today,
    ) -> None:
        self.roster = roster
        self.config = config or ShellConfig()
        self._input = input_func or input
        self._output = output or print
        self._clock = clock
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_employee,
            2: self.remove_employee,
            3: self.list_all,
            4: self.search_by_id,
            5: self.list_by_role,
            6: self.update_employee,
            7: self.raise_salary,
            8: self.payroll_stats,
            9: self.save,
            10: self.load,
            11: self.sort_and_show,
        }

    # Main loop
    def run(self) -> None:
        if self.config.autoload:
            self._autoload()
        while True:
            self._output(MENU)
            try:
                choice = self._read_int("Choice: ")
            except EOFError:
                break
            except ValueError as exc:
                self._warn(str(exc))
                continue
            if choice == EXIT_CHOICE:
                self._output("Bye!")
                break
            action = self._actions.get(choice)
            try:
                if action is None:
                    self._warn("Invalid option.")
                else:
                    action()
            except EOFError:
                break
            except (ValueError, OSError) as exc:
                logger.debug("Action %s failed", choice, exc_info=True)
                self._warn(str(exc))
            self._output("")

    def _autoload(self) -> None:
        path = self.config.csv_path
        if not path.exists():
            self._output("No previous data found. Starting fresh.")
            return
        try:
            count = self.roster.load_csv(path, clock=self._clock)
        except (ValueError, OSError) as exc:
            self._warn(f"Failed to load CSV: {exc}")
            return
        self._ok(f"Auto-loaded {count} employees from {path}")

    # CRUD actions
    def add_employee(self) -> None:
        employee_id = self._read_int("ID: ")
        if self.roster.get_by_id(employee_id) is not None:
            self._warn(f"ID {employee_id} already exists.")
            return
        name = self._read_line("Name: ")
        age = self._read_int(f"Age (>{Employee.MINIMUM_AGE}): ")
        Employee.check_age(age)
        salary = self._read_float("Salary: ")
        role = self._pick_role()
        if role is None:
            return
        join_date = self._read_date("Date of joining (yyyy-mm-dd): ")
        employee = Employee(employee_id, name, age, salary, role, join_date, clock=self._clock)
        if self.roster.add(employee):
            self._ok("Added.")
        else:
            self._warn(f"ID {employee_id} already exists.")

    def remove_employee(self) -> None:
        if self.roster.remove(self._read_int("ID to remove: ")):
            self._ok("Removed.")
        else:
            self._warn("No such ID.")

    def list_all(self) -> None:
        self._show(self.roster.employees())

    def search_by_id(self) -> None:
        employee = self.roster.get_by_id(self._read_int("ID to search: "))
        if employee is None:
            self._warn("Not found.")
        else:
            self._output(format_employee(employee))

    def list_by_role(self) -> None:
        role = self._pick_role()
        if role is not None:
            self._show(self.roster.by_role(role))

    def update_employee(self) -> None:
        employee = self.roster.get_by_id(self._read_int("ID to update: "))
        if employee is None:
            self._warn("Not found.")
            return
        self._output("Current -> " + format_employee(employee))
        name = self._read_line("New name (blank = skip): ")
        if name:
            employee.name = name
        age = self._read_line("New age (blank = skip): ")
        if age:
            try:
                employee.age = int(age)
            except InvalidAgeError as exc:
                self._warn(str(exc))
                return
        salary = self._read_line("New salary (blank = skip): ")
        if salary:
            employee.salary = float(salary)
        if self._yes_no("Change role? (y/n): "):
            role = self._pick_role()
            if role is None:
                return
            employee.role = role
        self._ok("Updated.")

    # Salary actions
    def raise_salary(self) -> None:
        if self._yes_no("Bulk raise? (y/n): "):
            pct = self._read_float("% raise: ")
            role = None
            if self._yes_no("Only one role? (y/n): "):
                role = self._pick_role()
                if role is None:
                    return
            count = self.roster.raise_all(pct, role)
            self._ok(f"Bulk raise applied to {count} employee(s).")
        else:
            employee_id = self._read_int("Employee ID: ")
            pct = self._read_float("% raise: ")
            if self.roster.raise_salary(employee_id, pct):
                self._ok("Raised.")
            else:
                self._warn("No such ID.")

    # Analytics and persistence
    def payroll_stats(self) -> None:
        self._output(f"Total payroll {self.roster.total_payroll():.2f}")
        for role, average in self.roster.average_salary_by_role().items():
            self._output(f"Avg {role.name:<7s} {average:.2f}")

    def save(self) -> None:
        self.roster.save_csv(self.config.csv_path)
        self._ok(f"Saved to {self.config.csv_path}")

    def load(self) -> None:
        count = self.roster.load_csv(self.config.csv_path, clock=self._clock)
        self._ok(f"Loaded {count} employees.")

    def sort_and_show(self) -> None:
        self._output("Sort by:\n 1. Name\n 2. Salary\n 3. Join-Date")
        order = SortOrder.from_selector(self._read_int("Option: "))
        if order is None:
            self._warn("Bad option.")
            return
        self._show(self.roster.sorted_view(order))

    # Console helpers
    def _show(self, employees: Iterable[Employee]) -> None:
        self._output(TABLE_HEADER)
        for employee in employees:
            self._output(format_employee(employee))

    def _ok(self, message: str) -> None:
        self._output("✅ " + message)

    def _warn(self, message: str) -> None:
        self._output("❌ " + message)

    def _read_line(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _read_int(self, prompt: str) -> int:
        return int(self._read_line(prompt))

    def _read_float(self, prompt: str) -> float:
        return float(self._read_line(prompt))

    def _read_date(self, prompt: str) -> _dt.date:
        return _dt.date.fromisoformat(self._read_line(prompt))

    def _yes_no(self, prompt: str) -> bool:
        return self._read_line(prompt).lower() == "y"

    def _pick_role(self) -> Optional[Role]:
        self._output("Role: 1.INTERN  2.FRESHER  3.SENIOR")
        selection = role_from_selector(self._read_int("Choose: "))
        if not selection.ok:
            self._warn(str(selection.error))
            return None
        return selection.role


def setup_logging(debug: bool) -> logging.Logger:
    """Attach a stderr handler to the module logger once."""
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-7s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    return logger


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive employee roster with CSV persistence.")
    parser.add_argument("--csv", default="employees.csv", help="Roster CSV file (default: employees.csv)")
    parser.add_argument("--no-autoload", action="store_true", help="Start with an empty roster")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args(argv)

    setup_logging(args.debug)
    config = ShellConfig(csv_path=Path(args.csv), autoload=not args.no_autoload)
    ConsoleShell(EmployeeRoster(), config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
