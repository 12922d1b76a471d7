from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional

from ..common.datetime_utils import format_iso_date


@dataclass(frozen=True)
class Student:
    """Domain entity: one student record ("siswa").

    nik and nisn are fixed at creation; only tingkat, rombel, tgl_masuk and
    terdaftar change afterwards.
    """

    nik: str
    nisn: str
    nama: str
    tingkat: str
    rombel: str
    tgl_masuk: date
    terdaftar: str
    student_id: Optional[int] = None

    def as_form(self) -> Dict[str, str]:
        """Field values as the HTML forms expect them."""
        return {
            "nik": self.nik,
            "nisn": self.nisn,
            "nama": self.nama,
            "tingkat": self.tingkat,
            "rombel": self.rombel,
            "tgl_masuk": format_iso_date(self.tgl_masuk),
            "terdaftar": self.terdaftar,
        }


@dataclass(frozen=True)
class EnrollmentUpdate:
    """The mutable part of a student, as submitted by the edit form."""

    nisn: str
    tingkat: str
    rombel: str
    tgl_masuk: date
    terdaftar: str
