from __future__ import annotations

import os
from dataclasses import replace
from datetime import date
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

os.environ["APP_ENV"] = "testing"

from siswa_admin.container import assemble
from siswa_admin.core.exceptions import DuplicateStudentError
from siswa_admin.main import create_app
from siswa_admin.sessions.store import InMemorySessionStore
from siswa_admin.students.messages import DUPLICATE_NIK, DUPLICATE_NISN
from siswa_admin.students.model import EnrollmentUpdate, Student
from siswa_admin.users.model import User

ADMIN_PASSWORD = "rahasia123"


class InMemoryUsers:
    def __init__(self, *users: User):
        self._by_username = {u.username: u for u in users}

    def get_by_username(self, username: str) -> Optional[User]:
        return self._by_username.get(username)


class InMemoryStudents:
    """Mirrors the unique indexes on nik and nisn."""

    def __init__(self):
        self._rows: list[Student] = []
        self._next_id = 1

    def list_all(self):
        return list(self._rows)

    def get_by_nik(self, nik: str) -> Optional[Student]:
        return next((s for s in self._rows if s.nik == nik), None)

    def get_by_nisn(self, nisn: str) -> Optional[Student]:
        return next((s for s in self._rows if s.nisn == nisn), None)

    def insert(self, student: Student) -> int:
        if any(s.nik == student.nik for s in self._rows):
            raise DuplicateStudentError("nik", DUPLICATE_NIK)
        if any(s.nisn == student.nisn for s in self._rows):
            raise DuplicateStudentError("nisn", DUPLICATE_NISN)
        sid = self._next_id
        self._next_id += 1
        self._rows.append(replace(student, student_id=sid))
        return sid

    def update_enrollment(self, update: EnrollmentUpdate) -> bool:
        for i, s in enumerate(self._rows):
            if s.nisn == update.nisn:
                self._rows[i] = replace(
                    s,
                    tingkat=update.tingkat,
                    rombel=update.rombel,
                    tgl_masuk=update.tgl_masuk,
                    terdaftar=update.terdaftar,
                )
                return True
        return False

    def delete_by_nisn(self, nisn: str) -> int:
        before = len(self._rows)
        self._rows = [s for s in self._rows if s.nisn != nisn]
        return before - len(self._rows)


def make_student(**overrides) -> Student:
    data = dict(
        nik="3201010101010001",
        nisn="0012345678",
        nama="Budi Santoso",
        tingkat="X",
        rombel="X-1",
        tgl_masuk=date(2025, 7, 14),
        terdaftar="Aktif",
    )
    data.update(overrides)
    return Student(**data)


@pytest.fixture
def users_repo():
    admin = User(user_id=1, username="admin", password_hash=generate_password_hash(ADMIN_PASSWORD))
    return InMemoryUsers(admin)


@pytest.fixture
def students_repo():
    return InMemoryStudents()


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def container(users_repo, students_repo, session_store):
    return assemble(users_repo=users_repo, students_repo=students_repo, session_store=session_store)


@pytest.fixture
def app(container):
    app = create_app(container=container)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client):
    resp = client.post("/login", data={"username": "admin", "password": ADMIN_PASSWORD})
    assert resp.status_code == 302
    return client
