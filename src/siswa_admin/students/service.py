from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import List, Mapping, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import (
    FieldRules,
    require_date,
    require_choice,
    require_digits,
    require_exact_length,
    require_max_length,
    require_non_empty,
    require_not_after,
    validate_form,
)
from ..core.constants import (
    DEFAULT_TGL_MASUK_CUTOFF,
    NAMA_MAX_LENGTH,
    NIK_LENGTH,
    NISN_LENGTH,
    ROMBEL_MAX_LENGTH,
    TERDAFTAR_CHOICES,
    TINGKAT_CHOICES,
)
from ..core.exceptions import (
    DuplicateStudentError,
    FieldError,
    FormValidationError,
    NotFoundError,
    ValidationError,
)
from . import messages
from .model import EnrollmentUpdate, Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


def _form_value(form: Mapping[str, str], field: str) -> str:
    value = form.get(field)
    return "" if value is None else str(value).strip()


class StudentService:
    """Use cases: list, add, edit and delete students."""

    def __init__(self, students: StudentRepository, *, cutoff: date = DEFAULT_TGL_MASUK_CUTOFF):
        self._students = students
        self._cutoff = cutoff

    @property
    def cutoff(self) -> date:
        return self._cutoff

    # --- rule sets -------------------------------------------------------

    def _require_unused_nik(self, value: str) -> None:
        if self._students.get_by_nik(value):
            raise ValidationError(messages.DUPLICATE_NIK)

    def _require_unused_nisn(self, value: str) -> None:
        if self._students.get_by_nisn(value):
            raise ValidationError(messages.DUPLICATE_NISN)

    def create_rules(self) -> Sequence[FieldRules]:
        return (
            FieldRules("nik")
            .check(require_exact_length, NIK_LENGTH, messages.NIK_LENGTH)
            .check(require_digits, messages.NIK_DIGITS)
            .bail()
            .check(self._require_unused_nik),
            FieldRules("nisn")
            .check(require_exact_length, NISN_LENGTH, messages.NISN_LENGTH)
            .check(require_digits, messages.NISN_DIGITS)
            .bail()
            .check(self._require_unused_nisn),
            FieldRules("nama").check(require_max_length, NAMA_MAX_LENGTH, messages.NAMA_TOO_LONG),
            *self._enrollment_rules(messages.TGL_MASUK_PAST_CUTOFF),
        )

    def edit_rules(self) -> Sequence[FieldRules]:
        return self._enrollment_rules(messages.TGL_MASUK_EDIT_PAST_CUTOFF)

    def _enrollment_rules(self, past_cutoff_message: str) -> Sequence[FieldRules]:
        """Rules for the fields both the add and the edit form submit."""
        return (
            FieldRules("tingkat").check(require_choice, TINGKAT_CHOICES, messages.TINGKAT_INVALID),
            FieldRules("rombel").check(require_max_length, ROMBEL_MAX_LENGTH, messages.ROMBEL_TOO_LONG),
            FieldRules("tgl_masuk")
            .check(require_non_empty, messages.TGL_MASUK_REQUIRED)
            .bail()
            .check(require_date, messages.TGL_MASUK_INVALID)
            .bail()
            .check(require_not_after, self._cutoff, past_cutoff_message),
            FieldRules("terdaftar").check(require_choice, TERDAFTAR_CHOICES, messages.TERDAFTAR_INVALID),
        )

    def validate_new(self, form: Mapping[str, str]) -> List[FieldError]:
        return validate_form(form, self.create_rules())

    def validate_edit(self, form: Mapping[str, str]) -> List[FieldError]:
        return validate_form(form, self.edit_rules())

    # --- use cases -------------------------------------------------------

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def get_by_nisn(self, nisn: str) -> Student:
        student = self._students.get_by_nisn((nisn or "").strip())
        if not student:
            raise NotFoundError(messages.NOT_FOUND)
        return student

    def create_student(self, form: Mapping[str, str]) -> Student:
        errors = self.validate_new(form)
        if errors:
            raise FormValidationError(errors)

        student = Student(
            nik=_form_value(form, "nik"),
            nisn=_form_value(form, "nisn"),
            nama=_form_value(form, "nama"),
            tingkat=_form_value(form, "tingkat"),
            rombel=_form_value(form, "rombel"),
            tgl_masuk=parse_iso_date(_form_value(form, "tgl_masuk")),
            terdaftar=_form_value(form, "terdaftar"),
        )

        # The unique index has the final word when two submissions race.
        try:
            student_id = self._students.insert(student)
        except DuplicateStudentError as e:
            logger.warning("Insert rejected by unique index on %s", e.field)
            raise FormValidationError([FieldError(field=e.field, message=str(e))]) from e

        logger.info("Student created nisn=%s id=%s", student.nisn, student_id)
        return replace(student, student_id=student_id)

    def update_student(self, form: Mapping[str, str]) -> EnrollmentUpdate:
        errors = self.validate_edit(form)
        if errors:
            raise FormValidationError(errors)

        update = EnrollmentUpdate(
            nisn=_form_value(form, "nisn"),
            tingkat=_form_value(form, "tingkat"),
            rombel=_form_value(form, "rombel"),
            tgl_masuk=parse_iso_date(_form_value(form, "tgl_masuk")),
            terdaftar=_form_value(form, "terdaftar"),
        )
        if not self._students.update_enrollment(update):
            raise NotFoundError(messages.NOT_FOUND)

        logger.info("Student updated nisn=%s", update.nisn)
        return update

    def delete_student(self, nisn: str) -> int:
        """Delete by nisn. Missing records are not an error."""
        deleted = self._students.delete_by_nisn((nisn or "").strip())
        logger.info("Student delete nisn=%s deleted=%s", nisn, deleted)
        return deleted
