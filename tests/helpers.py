# tests/helpers.py
import json

import requests

from app.api import contributors as contributors_api


def make_response(body, status_code: int = 200) -> requests.Response:
    """Build a real requests.Response carrying the given body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = contributors_api.CONTRIBUTORS_UPSTREAM_URL
    if isinstance(body, bytes):
        response._content = body
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response
