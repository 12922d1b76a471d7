from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .core.constants import DEFAULT_TGL_MASUK_CUTOFF
from .database.connection import DBConfig, DatabaseConnection
from .sessions.store import InMemorySessionStore, SessionStore
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    students_repo: StudentRepository
    session_store: SessionStore

    auth_service: AuthService
    student_service: StudentService


def assemble(
    *,
    users_repo: UserRepository,
    students_repo: StudentRepository,
    session_store: Optional[SessionStore] = None,
    cutoff: date = DEFAULT_TGL_MASUK_CUTOFF,
) -> Container:
    """Wire services around the given repositories."""
    return Container(
        users_repo=users_repo,
        students_repo=students_repo,
        session_store=session_store if session_store is not None else InMemorySessionStore(),
        auth_service=AuthService(users_repo),
        student_service=StudentService(students_repo, cutoff=cutoff),
    )


def build_container(*, db_config: dict, cutoff: date = DEFAULT_TGL_MASUK_CUTOFF) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return assemble(
        users_repo=MySQLUserRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        cutoff=cutoff,
    )
