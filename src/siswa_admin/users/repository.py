from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    The service layer depends on this interface, not on a concrete database.
    """

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError
