from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.constants import MYSQL_DUPLICATE_KEY
from ..core.exceptions import DuplicateStudentError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .messages import DUPLICATE_NIK, DUPLICATE_NISN
from .model import EnrollmentUpdate, Student
from .repository import StudentRepository

_COLUMNS = "student_id, nik, nisn, nama, tingkat, rombel, tgl_masuk, terdaftar"


def _to_student(row: Dict[str, Any]) -> Student:
    return Student(
        student_id=int(row["student_id"]),
        nik=row["nik"],
        nisn=row["nisn"],
        nama=row.get("nama") or "",
        tingkat=row.get("tingkat") or "",
        rombel=row.get("rombel") or "",
        tgl_masuk=row["tgl_masuk"],
        terdaftar=row.get("terdaftar") or "",
    )


def duplicate_error_from(exc: mysql.connector.IntegrityError) -> Optional[DuplicateStudentError]:
    """Map a duplicate-key error on ``students`` to the field it names."""
    if getattr(exc, "errno", None) != MYSQL_DUPLICATE_KEY:
        return None
    text = str(getattr(exc, "msg", "") or exc)
    if "uq_students_nisn" in text:
        return DuplicateStudentError("nisn", DUPLICATE_NISN)
    if "uq_students_nik" in text:
        return DuplicateStudentError("nik", DUPLICATE_NIK)
    return None


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students ORDER BY student_id")
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_nik(self, nik: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE nik=%s", (nik,))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def get_by_nisn(self, nisn: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE nisn=%s", (nisn,))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def insert(self, student: Student) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO students(nik, nisn, nama, tingkat, rombel, tgl_masuk, terdaftar)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        student.nik,
                        student.nisn,
                        student.nama,
                        student.tingkat,
                        student.rombel,
                        student.tgl_masuk,
                        student.terdaftar,
                    ),
                )
            except mysql.connector.IntegrityError as e:
                dup = duplicate_error_from(e)
                if dup is None:
                    raise
                raise dup from e
            return int(cur.lastrowid)

    def update_enrollment(self, update: EnrollmentUpdate) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET tingkat=%s, rombel=%s, tgl_masuk=%s, terdaftar=%s
                WHERE nisn=%s
                """,
                (update.tingkat, update.rombel, update.tgl_masuk, update.terdaftar, update.nisn),
            )
            return cur.rowcount > 0

    def delete_by_nisn(self, nisn: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE nisn=%s LIMIT 1", (nisn,))
            return max(int(cur.rowcount), 0)
