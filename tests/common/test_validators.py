from __future__ import annotations

from datetime import date

import pytest

from siswa_admin.common.validators import (
    FieldRules,
    errors_by_field,
    require_choice,
    require_date,
    require_digits,
    require_exact_length,
    require_max_length,
    require_non_empty,
    require_not_after,
    validate_form,
)
from siswa_admin.core.exceptions import FieldError, ValidationError


def test_require_digits_rejects_signs_decimals_and_unicode_digits():
    for value in ["-123", "12.5", "1e5", "١٢٣", "²", ""]:
        with pytest.raises(ValidationError):
            require_digits(value, "bad")
    assert require_digits("0012", "bad") == "0012"


def test_require_exact_length():
    assert require_exact_length("12345", 5, "bad") == "12345"
    with pytest.raises(ValidationError, match="bad"):
        require_exact_length("1234", 5, "bad")


def test_require_date_parses_iso_only():
    assert require_date("2025-01-31", "bad") == date(2025, 1, 31)
    for value in ["31-01-2025", "2025-02-30", "kemarin"]:
        with pytest.raises(ValidationError):
            require_date(value, "bad")


def test_require_not_after_accepts_limit_and_rejects_later():
    limit = date(2025, 11, 26)
    assert require_not_after("2025-11-26", limit, "late") == limit
    with pytest.raises(ValidationError, match="late"):
        require_not_after("2025-11-27", limit, "late")
    # unparseable dates are someone else's problem
    assert require_not_after("??", limit, "late") is None


def test_chain_collects_every_failure_in_order():
    rules = FieldRules("nik").check(require_exact_length, 16, "length").check(require_digits, "digits")

    errors = rules.run({"nik": "12ab"})

    assert errors == [FieldError("nik", "length"), FieldError("nik", "digits")]


def test_bail_stops_after_earlier_failure():
    calls = []

    def spy(value):
        calls.append(value)

    rules = FieldRules("nisn").check(require_digits, "digits").bail().check(spy)

    assert rules.run({"nisn": "abc"}) == [FieldError("nisn", "digits")]
    assert calls == []

    assert rules.run({"nisn": "123"}) == []
    assert calls == ["123"]


def test_validate_form_keeps_field_order_and_checks_raw_values():
    rules = (
        FieldRules("a").check(require_exact_length, 2, "a-len"),
        FieldRules("b").check(require_exact_length, 2, "b-len"),
    )

    errors = validate_form({"a": " 12 ", "b": "1"}, rules)

    assert errors == [FieldError("a", "a-len"), FieldError("b", "b-len")]
    assert validate_form({"a": "12", "b": "34"}, rules) == []
    assert errors_by_field(validate_form({}, rules)) == {"a": ["a-len"], "b": ["b-len"]}


def test_padded_digits_fail_length_and_digit_checks():
    rules = FieldRules("nisn").check(require_exact_length, 10, "len").check(require_digits, "digits")

    assert rules.run({"nisn": "1234567890\t"}) == [FieldError("nisn", "len"), FieldError("nisn", "digits")]
    assert rules.run({"nisn": " 123456789"}) == [FieldError("nisn", "digits")]


def test_require_non_empty_still_ignores_whitespace():
    rules = FieldRules("tgl").check(require_non_empty, "wajib")

    assert rules.run({"tgl": "   "}) == [FieldError("tgl", "wajib")]


def test_require_max_length():
    assert require_max_length("x" * 50, 50, "msg") == "x" * 50
    with pytest.raises(ValidationError, match="msg"):
        require_max_length("x" * 51, 50, "msg")


def test_require_choice_is_exact():
    assert require_choice("XI", ("X", "XI", "XII"), "msg") == "XI"
    for bad in ("xi", " XI", "XIII", ""):
        with pytest.raises(ValidationError):
            require_choice(bad, ("X", "XI", "XII"), "msg")
