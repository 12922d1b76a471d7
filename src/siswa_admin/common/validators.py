from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterable, List, Mapping, Optional

from ..core.exceptions import FieldError, ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_exact_length(value: str, length: int, message: str) -> str:
    if value is None or len(value) != length:
        raise ValidationError(message)
    return value


def require_max_length(value: str, limit: int, message: str) -> str:
    if value is not None and len(value) > limit:
        raise ValidationError(message)
    return value


def require_choice(value: str, choices: Iterable[str], message: str) -> str:
    if value not in choices:
        raise ValidationError(message)
    return value


def require_digits(value: str, message: str) -> str:
    # str.isdigit() also accepts superscripts and other unicode digits
    if not value or not all("0" <= ch <= "9" for ch in value):
        raise ValidationError(message)
    return value


def require_date(value: str, message: str) -> date:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(message)


def require_not_after(value: str, limit: date, message: str) -> Optional[date]:
    """Dates that fail to parse are left to ``require_date``."""
    try:
        parsed = parse_iso_date(value)
    except (TypeError, ValueError):
        return None
    if parsed > limit:
        raise ValidationError(message)
    return parsed


_BAIL = object()


class FieldRules:
    """Ordered rule chain for one form field.

    Every check runs and contributes its own message, except that ``bail()``
    stops the chain when any earlier check on the field has already failed.
    """

    def __init__(self, field: str):
        self.field = field
        self._steps: List[Any] = []

    def check(self, rule: Callable[..., Any], *args: Any) -> "FieldRules":
        self._steps.append((rule, args))
        return self

    def bail(self) -> "FieldRules":
        self._steps.append(_BAIL)
        return self

    def run(self, form: Mapping[str, Any]) -> List[FieldError]:
        value = form.get(self.field)
        # raw value; only require_non_empty looks past surrounding whitespace
        value = "" if value is None else str(value)

        errors: List[FieldError] = []
        for step in self._steps:
            if step is _BAIL:
                if errors:
                    break
                continue
            rule, args = step
            try:
                rule(value, *args)
            except ValidationError as e:
                errors.append(FieldError(field=self.field, message=str(e)))
        return errors


def validate_form(form: Mapping[str, Any], rules: Iterable[FieldRules]) -> List[FieldError]:
    errors: List[FieldError] = []
    for chain in rules:
        errors.extend(chain.run(form))
    return errors


def errors_by_field(errors: Iterable[FieldError]) -> dict[str, List[str]]:
    out: dict[str, List[str]] = {}
    for e in errors:
        out.setdefault(e.field, []).append(e.message)
    return out

