from __future__ import annotations

import secrets
from typing import Any, Dict, Optional

from flask import Flask, Request, Response
from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, Signer
from werkzeug.datastructures import CallbackDict

from .store import SessionStore


def _new_sid() -> str:
    return secrets.token_urlsafe(32)


class ServerSession(CallbackDict, SessionMixin):
    """Session dict whose contents live in a ``SessionStore``.

    The browser only ever holds the signed session id.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None, *, sid: str, new: bool = False):
        def on_update(self):
            self.modified = True
            self.accessed = True

        super().__init__(initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False
        self.accessed = False


class ServerSessionInterface(SessionInterface):
    salt = "siswa-admin-session"

    def __init__(self, store: SessionStore):
        self.store = store

    def _signer(self, app: Flask) -> Optional[Signer]:
        if not app.secret_key:
            return None
        return Signer(app.secret_key, salt=self.salt)

    def open_session(self, app: Flask, request: Request) -> Optional[ServerSession]:
        signer = self._signer(app)
        if signer is None:
            return None

        cookie = request.cookies.get(self.get_cookie_name(app))
        if cookie:
            try:
                sid = signer.unsign(cookie).decode("utf-8")
            except BadSignature:
                sid = None
            if sid:
                data = self.store.get(sid)
                if data is not None:
                    return ServerSession(data, sid=sid)

        return ServerSession(sid=_new_sid(), new=True)

    def save_session(self, app: Flask, session: ServerSession, response: Response) -> None:
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if not session:
            if session.modified:
                self.store.delete(session.sid)
                if not session.new:
                    response.delete_cookie(name, domain=domain, path=path)
            return

        if session.accessed:
            response.vary.add("Cookie")

        if not self.should_set_cookie(app, session):
            return

        self.store.save(session.sid, dict(session), app.permanent_session_lifetime)
        response.set_cookie(
            name,
            self._signer(app).sign(session.sid.encode("utf-8")).decode("utf-8"),
            expires=self.get_expiration_time(app, session),
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )


def rotate_session(session: ServerSession, store: SessionStore) -> None:
    """Drop the current record and continue under a fresh id (used at login)."""
    store.delete(session.sid)
    session.clear()
    session.sid = _new_sid()
    session.new = True
