from __future__ import annotations

import io
from urllib.parse import parse_qs

from werkzeug.wsgi import get_input_stream


class MethodOverrideMiddleware:
    """Let HTML forms reach PUT/DELETE routes.

    A form-encoded POST whose body carries ``_method=PUT`` (or DELETE/PATCH)
    is dispatched as that verb. The body is buffered and handed back to the
    wrapped app unchanged, so Flask still parses the form normally.
    """

    allowed_methods = frozenset(["PUT", "DELETE", "PATCH"])

    def __init__(self, app, field: str = "_method"):
        self.app = app
        self.field = field

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST" and self._is_form(environ):
            body = get_input_stream(environ).read()
            environ["wsgi.input"] = io.BytesIO(body)
            environ["CONTENT_LENGTH"] = str(len(body))
            environ.pop("wsgi.input_terminated", None)

            values = parse_qs(body.decode("latin-1"), keep_blank_values=True).get(self.field)
            if values:
                method = values[0].strip().upper()
                if method in self.allowed_methods:
                    environ["REQUEST_METHOD"] = method

        return self.app(environ, start_response)

    @staticmethod
    def _is_form(environ) -> bool:
        content_type = environ.get("CONTENT_TYPE", "")
        return content_type.split(";", 1)[0].strip().lower() == "application/x-www-form-urlencoded"
