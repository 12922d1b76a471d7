from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: admin account.

    Note: plain data object, no DB access code here.
    """

    user_id: int
    username: str
    password_hash: str
