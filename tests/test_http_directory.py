from __future__ import annotations

from dataclasses import replace

import re

import pytest
import requests

from config.settings import get_settings
from models import ContactRecord
from services.errors import DirectoryLookupError
from services.http_directory import HttpContactDirectory


class _FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _settings(**overrides):
    base = replace(
        get_settings(),
        directory_backend="http",
        directory_url="https://directory.example/rest/v1/",
        directory_api_key="secret",
        directory_timeout_seconds=3.0,
    )
    return replace(base, **overrides)


def test_find_by_company_builds_ilike_query():
    session = _FakeSession(_FakeResponse(payload=[
        {"name": "Jane Doe", "company": "Acme Corporation", "email": "jane@acme.com", "id": 7},
    ]))
    rec = HttpContactDirectory(_settings(), session=session).find_by_company("Acme Corp")
    assert rec == ContactRecord(name="Jane Doe", company="Acme Corporation", email="jane@acme.com")
    call = session.calls[0]
    assert call["url"] == "https://directory.example/rest/v1/contacts"
    assert call["params"]["company"] == "ilike.*Acme Corp*"
    assert call["params"]["limit"] == 1
    assert call["headers"]["apikey"] == "secret"
    assert call["headers"]["Authorization"] == "Bearer secret"
    assert call["timeout"] == 3.0


def test_empty_list_is_not_found():
    session = _FakeSession(_FakeResponse(payload=[]))
    assert HttpContactDirectory(_settings(), session=session).find_by_company("Nope") is None


def test_no_api_key_sends_no_auth_headers():
    session = _FakeSession(_FakeResponse(payload=[]))
    HttpContactDirectory(_settings(directory_api_key=None), session=session).find_by_company("Acme")
    assert "Authorization" not in session.calls[0]["headers"]


@pytest.mark.parametrize("error", [
    requests.exceptions.ConnectionError("connection refused"),
    requests.exceptions.ReadTimeout("read timed out"),
])
def test_transport_faults_become_lookup_errors(error):
    session = _FakeSession(error=error)
    with pytest.raises(DirectoryLookupError):
        HttpContactDirectory(_settings(), session=session).find_by_company("Acme")
    assert len(session.calls) == 1


@pytest.mark.parametrize("response", [
    _FakeResponse(status_code=503, text="Service Unavailable"),
    _FakeResponse(payload=ValueError("not json")),
    _FakeResponse(payload={"message": "oops"}),
    _FakeResponse(payload=[{"name": "Jane"}]),
])
def test_bad_responses_become_lookup_errors(response):
    session = _FakeSession(response)
    with pytest.raises(DirectoryLookupError):
        HttpContactDirectory(_settings(), session=session).find_by_company("Acme")


def test_requires_directory_url():
    with pytest.raises(ValueError):
        HttpContactDirectory(_settings(directory_url=None), session=_FakeSession())


def _ilike_regex(filter_value):
    """Translate a PostgREST ``ilike.<pattern>`` filter the way the server evaluates it."""
    assert filter_value.startswith("ilike.")
    pattern = filter_value[len("ilike."):].replace("*", "%")
    out, i = [], 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\" and i + 1 < len(pattern):
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        out.append(".*" if ch == "%" else "." if ch == "_" else re.escape(ch))
        i += 1
    return re.compile("".join(out), re.IGNORECASE | re.DOTALL)


class _PostgrestSession:
    """Serves a fixed contacts table, filtering and limiting like PostgREST."""

    def __init__(self, rows):
        self.rows = rows
        self.calls = []
        self.closed = False

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append(params)
        regex = _ilike_regex(params["company"])
        hits = [r for r in self.rows if regex.fullmatch(r["company"])]
        return _FakeResponse(payload=hits[: int(params["limit"])])

    def close(self):
        self.closed = True


TABLE = [
    {"name": "B", "company": "AxB Labs", "email": "b@axb.io"},
    {"name": "Pct", "company": "50/50 Partners", "email": "p@5050.io"},
    {"name": "Carl", "company": "Acme, Inc.", "email": "carl@acme.com"},
    {"name": "Under", "company": "A_B Holdings", "email": "u@ab.io"},
    {"name": "Paren", "company": "Initech (Berlin)", "email": "p@initech.de"},
    {"name": "Star", "company": "Star Co", "email": "s@starco.io"},
    {"name": "Starred", "company": "Star*Co", "email": "s@starstar.io"},
    {"name": "Slash", "company": "Back\\Slash Ltd", "email": "b@slash.io"},
    {"name": "Hundred", "company": "Globex 100% Solutions", "email": "h@globex.io"},
]


def _lookup(query):
    session = _PostgrestSession(TABLE)
    rec = HttpContactDirectory(_settings(), session=session).find_by_company(query)
    return rec, session


@pytest.mark.parametrize("query,expected_email", [
    ("Acme, Inc", "carl@acme.com"),
    ("initech (berlin)", "p@initech.de"),
    ("A_B", "u@ab.io"),
    ("0% s", "h@globex.io"),
    ("k\\sl", "b@slash.io"),
    ("STAR*co", "s@starstar.io"),
])
def test_special_characters_match_literally(query, expected_email):
    rec, _ = _lookup(query)
    assert rec is not None
    assert rec.email == expected_email


@pytest.mark.parametrize("query", ["A%B", "5_/", "x\\B"])
def test_wildcard_characters_do_not_widen_the_match(query):
    rec, _ = _lookup(query)
    assert rec is None


def test_comma_and_parens_are_sent_unchanged():
    _, session = _lookup("Initech (Berlin), x")
    assert session.calls[0]["company"] == "ilike.*Initech (Berlin), x*"
    assert session.calls[0]["limit"] == 1


def test_any_2xx_status_is_accepted():
    session = _FakeSession(_FakeResponse(status_code=203, payload=[
        {"name": "Jane Doe", "company": "Acme Corporation", "email": "jane@acme.com"},
    ]))
    rec = HttpContactDirectory(_settings(), session=session).find_by_company("Acme")
    assert rec is not None and rec.email == "jane@acme.com"


def test_close_closes_the_session():
    session = _PostgrestSession(TABLE)
    directory = HttpContactDirectory(_settings(), session=session)
    directory.close()
    assert session.closed is True
