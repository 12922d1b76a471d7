from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EnrollmentUpdate, Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Implementations must enforce nik/nisn uniqueness themselves and raise
    ``DuplicateStudentError`` on a clash.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_nik(self, nik: str) -> Optional[Student]:
        raise NotImplementedError

    def get_by_nisn(self, nisn: str) -> Optional[Student]:
        raise NotImplementedError

    def insert(self, student: Student) -> int:
        raise NotImplementedError

    def update_enrollment(self, update: EnrollmentUpdate) -> bool:
        """Return False when no student has ``update.nisn``."""
        raise NotImplementedError

    def delete_by_nisn(self, nisn: str) -> int:
        """Return the number of deleted rows (0 or 1)."""
        raise NotImplementedError
