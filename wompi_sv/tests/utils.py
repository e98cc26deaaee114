"""
Helpers de tests: respuestas HTTP falsas y una sesión que las enruta por URL.
"""
import json
from unittest import mock

import requests


AUTH_URL = "https://id.wompi.sv/test"
API_URL = "https://api.wompi.sv/v1/test"
CLIENT_ID = "test_client_id"
CLIENT_SECRET = "test_client_secret"


def make_response(status_code=200, body=None, raw=None):
    if raw is None:
        raw = json.dumps(body) if body is not None else ""
    response = requests.Response()
    response.status_code = status_code
    response._content = raw.encode("utf-8")
    response.encoding = "utf-8"
    return response


def auth_response(token="test_token", expires_in=3600):
    return make_response(200, {"access_token": token, "expires_in": expires_in, "token_type": "Bearer"})


def make_session(routes):
    """
    ``routes``: URL -> respuesta, excepción o lista de respuestas (se consumen en orden).
    """
    session = mock.Mock(spec=requests.Session)

    def _request(method, url, **kwargs):
        target = routes[url]
        if isinstance(target, list):
            target = target.pop(0)
        if isinstance(target, Exception):
            raise target
        return target

    session.request.side_effect = _request
    return session


def calls_to(session, url):
    return [c for c in session.request.call_args_list if c.args[1] == url]
