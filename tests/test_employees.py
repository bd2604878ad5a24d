import builtins

import pytest

from coursekit.employees import (
    Employee,
    EmployeeNotFoundError,
    EmployeeRegistry,
    Field,
    RegistryFullError,
    format_employee,
    main,
    menu_choice,
    parse_int,
)


def _sample_registry():
    registry = EmployeeRegistry()
    registry.add(Employee(3, "Carol", "F", "1990-03-01", "MSc", "Manager", "111", "North Rd"))
    registry.add(Employee(1, "Alice", "F", "1985-07-12", "BSc", "Engineer", "222", "East Rd"))
    registry.add(Employee(2, "Bob", "M", "1992-11-30", "PhD", "Analyst", "333", "West Rd"))
    return registry


def test_add_and_get():
    registry = _sample_registry()
    assert len(registry) == 3
    assert registry.get(1).name == "Alice"


def test_iteration_preserves_insertion_order():
    registry = _sample_registry()
    assert [e.id for e in registry] == [3, 1, 2]


def test_remove_shifts_remaining():
    registry = _sample_registry()
    removed = registry.remove(1)
    assert removed.name == "Alice"
    assert [e.id for e in registry] == [3, 2]


def test_remove_missing_raises():
    registry = _sample_registry()
    with pytest.raises(EmployeeNotFoundError):
        registry.remove(42)
    assert len(registry) == 3


def test_get_missing_raises():
    with pytest.raises(EmployeeNotFoundError):
        EmployeeRegistry().get(1)


def test_capacity_is_enforced():
    registry = EmployeeRegistry(capacity=2)
    registry.add(Employee(1))
    registry.add(Employee(2))
    with pytest.raises(RegistryFullError):
        registry.add(Employee(3))
    assert len(registry) == 2


def test_invalid_capacity():
    with pytest.raises(ValueError):
        EmployeeRegistry(0)


@pytest.mark.parametrize("field", list(Field))
def test_sort_orders_every_field(field):
    registry = _sample_registry()
    registry.sort(field)
    values = [getattr(e, field.attribute) for e in registry]
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert len(values) == 3


def test_sort_by_id():
    registry = _sample_registry()
    registry.sort(Field.ID)
    assert [e.id for e in registry] == [1, 2, 3]


def test_sort_is_stable():
    registry = _sample_registry()
    registry.sort(Field.GENDER)
    assert [e.id for e in registry] == [3, 1, 2]


def test_search_by_string_field():
    registry = _sample_registry()
    assert [e.id for e in registry.search(Field.GENDER, "F")] == [3, 1]


def test_search_by_id_uses_lenient_parse():
    registry = _sample_registry()
    assert [e.name for e in registry.search(Field.ID, " 2abc")] == ["Bob"]


def test_search_empty_value_matches_nothing():
    registry = _sample_registry()
    assert registry.search(Field.NAME, "") == []


def test_search_requires_exact_match():
    registry = _sample_registry()
    assert registry.search(Field.NAME, "Ali") == []


def test_update_changes_fields_but_not_id():
    registry = _sample_registry()
    updated = registry.update(2, name="Robert", phone="999")
    assert updated.id == 2
    assert registry.get(2).name == "Robert"
    assert registry.get(2).phone == "999"
    assert registry.get(2).position == "Analyst"


def test_update_rejects_id_and_unknown_fields():
    registry = _sample_registry()
    with pytest.raises(TypeError):
        registry.update(2, id=5)
    with pytest.raises(TypeError):
        registry.update(2, salary="1")
    assert registry.get(2).name == "Bob"


def test_update_missing_raises():
    with pytest.raises(EmployeeNotFoundError):
        _sample_registry().update(9, name="X")


def test_format_employee():
    employee = Employee(7, "Ann", "F", "1990", "BSc", "Dev", "555", "Main St")
    assert format_employee(employee) == (
        "ID: 7  NAME: Ann  GENDER: F  BIRTH: 1990  EDUCATION: BSc  "
        "POSITION: Dev  PHONE: 555  ADDRESS: Main St"
    )


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -7x", -7), ("+5", 5), ("abc", 0), ("", 0)],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (200, 150, 1),
        (300, 230, 2),
        (300, 300, 3),
        (300, 370, 4),
        (300, 440, 5),
        (300, 510, 6),
        (600, 620, 7),
        (300, 210, 0),
        (100, 160, 0),
        (601, 160, 0),
    ],
)
def test_menu_choice(x, y, expected):
    assert menu_choice(x, y) == expected


def test_field_numbers_match_menu():
    assert Field(1) is Field.ID
    assert Field(8).attribute == "address"


def _feed(monkeypatch, answers):
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_main_insert_and_show(monkeypatch, capsys):
    _feed(
        monkeypatch,
        ["1", "7", "Ann", "F", "1990", "BSc", "Dev", "555", "Main St", "5", "7"],
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "插入成功！" in out
    assert format_employee(Employee(7, "Ann", "F", "1990", "BSc", "Dev", "555", "Main St")) in out


def test_main_delete_missing_and_invalid_sort(monkeypatch, capsys):
    _feed(monkeypatch, ["3", "12", "4", "9", "5"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "未找到该员工信息" in out
    assert "无效选项！" in out
    assert "当前无员工信息！" in out