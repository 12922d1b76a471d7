from __future__ import annotations

from werkzeug.test import Client
from werkzeug.wrappers import Request, Response

from siswa_admin.common.method_override import MethodOverrideMiddleware


@Request.application
def echo(request):
    return Response(f"{request.method}|{request.form.get('nisn', '')}")


def _client():
    return Client(MethodOverrideMiddleware(echo))


def test_form_post_with_method_field_is_rewritten():
    resp = _client().post("/", data={"_method": "delete", "nisn": "0012345678"})

    assert resp.get_data(as_text=True) == "DELETE|0012345678"


def test_body_is_still_readable_after_override():
    resp = _client().post("/", data={"_method": "PUT", "nisn": "1"})

    assert resp.get_data(as_text=True) == "PUT|1"


def test_unknown_override_is_ignored():
    resp = _client().post("/", data={"_method": "TRACE", "nisn": "1"})

    assert resp.get_data(as_text=True) == "POST|1"


def test_get_and_json_posts_untouched():
    client = _client()

    assert client.get("/?_method=DELETE").get_data(as_text=True) == "GET|"
    resp = client.post("/", json={"_method": "DELETE"})
    assert resp.get_data(as_text=True).startswith("POST|")
