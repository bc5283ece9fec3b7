"""Recording stand-ins for the executor and the HTTP session."""

from __future__ import annotations

import json


class RecordingExecutor:
    def __init__(self, response=None):
        self.calls = []
        self.response = response

    def execute(self, request):
        self.calls.append(request)
        return self.response


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.status_code = status_code
        self._payload = payload
        self.content = b"" if payload is None else json.dumps(payload).encode()
        self.text = self.content.decode()

    def json(self):
        return self._payload


class FakeSession:
    """Answers GETs from a queue of responses and records every request."""

    def __init__(self, get_responses=None, post_response=None):
        self.headers = {}
        self.auth = None
        self.gets = []
        self.posts = []
        self._get_responses = list(get_responses or [])
        self._post_response = post_response or FakeResponse({})

    def get(self, url, params=None, timeout=None):
        self.gets.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        return self._get_responses.pop(0)

    def post(self, url, data=None, timeout=None):
        self.posts.append({"url": url, "data": dict(data or {}), "timeout": timeout})
        return self._post_response
