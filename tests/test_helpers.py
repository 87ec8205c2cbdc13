import pytest
import requests

from uking_mod_manager.utils import check_host_status, format_version, strip_markup
from uking_mod_manager.utils import helpers


@pytest.mark.parametrize(
    "version,expected",
    [(1.0, "1.0"), (1.25, "1.25"), (2, "2.0"), ("1.0.3", "1.0.3"), (" 3.1 ", "3.1"), (None, "")],
)
def test_format_version(version, expected):
    assert format_version(version) == expected


def test_strip_markup():
    assert strip_markup("") == ""
    assert strip_markup("  plain  ") == "plain"
    assert strip_markup("<b>Bold</b> move<br/>next line") == "Bold move\nnext line"


class _Head:
    def __init__(self, status_code=None, error=None):
        self.status_code = status_code
        self.error = error

    def __call__(self, url, timeout):
        if self.error:
            raise self.error
        return type("Response", (), {"status_code": self.status_code})()


def test_check_host_status_online(monkeypatch):
    monkeypatch.setattr(helpers.requests, "head", _Head(status_code=200))
    assert check_host_status("http://host") == (True, "Host is online")


def test_check_host_status_server_error(monkeypatch):
    monkeypatch.setattr(helpers.requests, "head", _Head(status_code=502))
    online, message = check_host_status("http://host")
    assert online is False
    assert "502" in message


@pytest.mark.parametrize(
    "error,fragment",
    [
        (requests.exceptions.ConnectionError(), "network error"),
        (requests.exceptions.Timeout(), "timed out"),
    ],
)
def test_check_host_status_failures(monkeypatch, error, fragment):
    monkeypatch.setattr(helpers.requests, "head", _Head(error=error))
    online, message = check_host_status("http://host")
    assert online is False
    assert fragment in message
