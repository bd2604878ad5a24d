"""An in-memory employee registry with a small text-menu front end."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, fields, replace
from enum import IntEnum
from typing import Iterator

MAX_EMPLOYEES = 100

# Longest accepted input for each field when read interactively.
FIELD_LIMITS = {
    "id": 19,
    "name": 49,
    "gender": 9,
    "birth": 14,
    "education": 29,
    "position": 29,
    "phone": 19,
    "address": 99,
}

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class EmployeeNotFoundError(LookupError):
    """Raised when no employee has the requested ID."""


class RegistryFullError(Exception):
    """Raised when adding to a registry that holds its maximum number of employees."""


class Field(IntEnum):
    """Employee fields usable as search and sort keys, numbered as in the menu."""

    ID = 1
    NAME = 2
    GENDER = 3
    BIRTH = 4
    EDUCATION = 5
    POSITION = 6
    PHONE = 7
    ADDRESS = 8

    @property
    def attribute(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Employee:
    """One employee record."""

    id: int
    name: str = ""
    gender: str = ""
    birth: str = ""
    education: str = ""
    position: str = ""
    phone: str = ""
    address: str = ""


_EDITABLE = tuple(f.name for f in fields(Employee) if f.name != "id")


def parse_int(text: str) -> int:
    """Read a leading integer the lenient way: skip blanks, stop at the first non-digit, 0 if none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _scan_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def format_employee(employee: Employee) -> str:
    """One-line listing of an employee."""
    return (
        f"ID: {employee.id}  NAME: {employee.name}  GENDER: {employee.gender}  "
        f"BIRTH: {employee.birth}  EDUCATION: {employee.education}  "
        f"POSITION: {employee.position}  PHONE: {employee.phone}  "
        f"ADDRESS: {employee.address}"
    )


def _format_current(employee: Employee) -> str:
    return (
        f"当前信息: ID: {employee.id}, NAME: {employee.name}, GENDER: {employee.gender}, "
        f"BIRTH: {employee.birth}, EDUCATION: {employee.education}, "
        f"POSITION: {employee.position}, PHONE: {employee.phone}, "
        f"ADDRESS: {employee.address}"
    )


def menu_choice(x: int, y: int) -> int:
    """Map a point on the main menu to its button: 1 insert … 7 exit, 0 for none."""
    if not 200 <= x <= 600:
        return 0
    for number, top in enumerate(range(150, 571, 70), start=1):
        if top <= y <= top + 50:
            return number
    return 0


class EmployeeRegistry:
    """An ordered, bounded collection of employees."""

    def __init__(self, capacity: int = MAX_EMPLOYEES) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._employees: list[Employee] = []

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees))

    def add(self, employee: Employee) -> None:
        if len(self._employees) >= self.capacity:
            raise RegistryFullError(f"registry holds at most {self.capacity} employees")
        self._employees.append(employee)

    def _index(self, employee_id: int) -> int:
        for index, employee in enumerate(self._employees):
            if employee.id == employee_id:
                return index
        raise EmployeeNotFoundError(employee_id)

    def remove(self, employee_id: int) -> Employee:
        """Remove the first employee with this ID and return it."""
        return self._employees.pop(self._index(employee_id))

    def get(self, employee_id: int) -> Employee:
        return self._employees[self._index(employee_id)]

    def search(self, field: Field, value: str) -> list[Employee]:
        """Employees whose field equals value exactly; an empty value matches nothing."""
        if not value:
            return []
        field = Field(field)
        if field is Field.ID:
            wanted = parse_int(value)
            return [e for e in self._employees if e.id == wanted]
        return [e for e in self._employees if getattr(e, field.attribute) == value]

    def sort(self, field: Field) -> None:
        """Stable ascending sort on one field."""
        attribute = Field(field).attribute
        self._employees.sort(key=lambda e: getattr(e, attribute))

    def update(self, employee_id: int, **kwargs: str) -> Employee:
        """Replace fields other than the ID of the first employee with this ID."""
        unknown = set(kwargs) - set(_EDITABLE)
        if unknown:
            raise TypeError(f"cannot update field(s): {', '.join(sorted(unknown))}")
        index = self._index(employee_id)
        updated = replace(self._employees[index], **kwargs)
        self._employees[index] = updated
        return updated


_MENU = (
    "\nManageSyetem\n"
    "1  insert\n"
    "2  research\n"
    "3  delete\n"
    "4  arrangem\n"
    "5  show\n"
    "6  update\n"
    "7  exit"
)

_KEYS_HELP = (
    "1 - ID, 2 - Name, 3 - Gender, 4 - Date of Birth, 5 - Education, "
    "6 - Position, 7 - Telephone, 8 - Address"
)


def _ask(prompt: str, attribute: str) -> str:
    return input(prompt)[: FIELD_LIMITS[attribute]]


def _insert(registry: EmployeeRegistry) -> None:
    print("Please input the information of the employee")
    employee_id = parse_int(_ask("Please input the ID: ", "id"))
    values = {name: _ask(f"Please input the {name}: ", name) for name in _EDITABLE}
    try:
        registry.add(Employee(employee_id, **values))
    except RegistryFullError as exc:
        print(exc)
        return
    print("插入成功！")


def _search(registry: EmployeeRegistry) -> None:
    print(f"Select the keywords to search by: {_KEYS_HELP}")
    key = _scan_int(input("Please input the keyword you choose: ")[:9])
    if key is None or not 1 <= key <= 8:
        print("无效选项！")
        return
    value = input("Please input the value you want to search: ")[:49]
    found = registry.search(Field(key), value)
    print("The result:")
    for employee in found:
        print(format_employee(employee))
    if not found:
        print("未找到符合条件的员工")


def _delete(registry: EmployeeRegistry) -> None:
    key = input("Please input the ID of the employee you want to delete: ")[:49]
    try:
        registry.remove(parse_int(key))
    except EmployeeNotFoundError:
        print("未找到该员工信息")
        return
    print("删除成功！")


def _sort(registry: EmployeeRegistry) -> None:
    print(f"Select the keywords to sort by: {_KEYS_HELP}")
    key = parse_int(input("Please input the keywords you choose: ")[:9])
    if not 1 <= key <= 8:
        print("无效选项！")
        return
    registry.sort(Field(key))
    print("排序完成！")


def _show(registry: EmployeeRegistry) -> None:
    print("The list of employee information:")
    for employee in registry:
        print(format_employee(employee))
    if len(registry) == 0:
        print("当前无员工信息！")


def _update(registry: EmployeeRegistry) -> None:
    key = input("Please input the ID of the employee you want to update: ")[:19]
    try:
        employee = registry.get(parse_int(key))
    except EmployeeNotFoundError:
        print("未找到该员工信息")
        return
    print(_format_current(employee))
    values = {name: _ask(f"请输入新的{name}：", name) for name in _EDITABLE}
    registry.update(employee.id, **values)
    print("更新成功！")


_ACTIONS = {1: _insert, 2: _search, 3: _delete, 4: _sort, 5: _show, 6: _update}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage employee records.")
    parser.add_argument(
        "--capacity", type=int, default=MAX_EMPLOYEES, help="maximum number of employees"
    )
    args = parser.parse_args(argv)
    registry = EmployeeRegistry(args.capacity)
    while True:
        print(_MENU)
        try:
            choice = parse_int(input("> "))
            if choice == 7:
                return 0
            action = _ACTIONS.get(choice)
            if action is not None:
                action(registry)
        except EOFError:
            return 0


if __name__ == "__main__":
    sys.exit(main())