"""Shared fixtures: canned Giphy payloads and a fake requests.get."""

import json
from pathlib import Path

import pytest
import requests

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name):
    with open(FIXTURES_DIR / f"{name}.json") as f:
        return json.load(f)


class DummyResp:
    """Stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeGet:
    """Records every call and answers with a fixed response or error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def happy_payload():
    return load_fixture("happy")


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get; call the returned factory to choose the answer."""

    def install(payload=None, **kwargs):
        error = kwargs.pop("error", None)
        fake = FakeGet(response=DummyResp(payload, **kwargs), error=error)
        monkeypatch.setattr("requests.get", fake)
        return fake

    return install
