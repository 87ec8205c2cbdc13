from unittest.mock import Mock

import pytest
import requests

from uking_mod_manager.core import CatalogError, HttpCatalogAPI, Mod, ModMeta

MOD_JSON = {
    "hash": "abc123",
    "enabled": True,
    "enabled_options": ["Hard"],
    "meta": {
        "name": "Second Wind",
        "version": 1.1,
        "category": "Overhaul",
        "author": "Waikuteru",
        "url": "https://gamebanana.com/mods/1",
        "description": "A big overhaul",
        "option_groups": [
            {"name": "Difficulty", "options": [{"name": "Easy"}, {"name": "Hard"}]},
        ],
    },
}


def _response(status_code: int = 200, payload=None, content: bytes = b"") -> Mock:
    response = Mock(status_code=status_code, content=content)
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


def _api(response=None, side_effect=None) -> HttpCatalogAPI:
    api = HttpCatalogAPI("http://host:6776/", timeout=3)
    api.session = Mock()
    if side_effect is not None:
        api.session.request.side_effect = side_effect
    else:
        api.session.request.return_value = response
    return api


def test_list_mods_parses_catalog_json():
    api = _api(_response(payload=[MOD_JSON]))
    mods = api.list_mods()

    api.session.request.assert_called_once_with("GET", "http://host:6776/mods", timeout=3)
    assert len(mods) == 1
    mod = mods[0]
    assert mod.hash == "abc123"
    assert mod.enabled is True
    assert mod.enabled_options == ("Hard",)
    assert mod.meta.name == "Second Wind"
    assert mod.all_options == ["Easy", "Hard"]


def test_list_mods_rejects_malformed_entries():
    api = _api(_response(payload=[{"enabled": True}]))
    with pytest.raises(CatalogError) as exc:
        api.list_mods()
    assert exc.value.error_type == "invalid"


def test_list_profiles_accepts_names_and_objects():
    api = _api(_response(payload=["Default", {"name": "Hardcore"}]))
    assert [p.name for p in api.list_profiles()] == ["Default", "Hardcore"]


def test_current_profile_name():
    api = _api(_response(payload={"name": "Default"}))
    assert api.current_profile_name() == "Default"
    api.session.request.assert_called_once_with("GET", "http://host:6776/profiles/current", timeout=3)


def test_preview_missing_returns_none():
    api = _api(_response(status_code=404))
    assert api.preview_artifact("abc123") is None


def test_preview_returns_bytes():
    api = _api(_response(content=b"\x89PNG"))
    assert api.preview_artifact("abc123") == b"\x89PNG"


def test_apply_posts_order_and_state():
    api = _api(_response())
    mods = [
        Mod(hash="b", meta=ModMeta(name="B"), enabled=True, enabled_options=["X"]),
        Mod(hash="a", meta=ModMeta(name="A")),
    ]
    api.apply(mods)

    api.session.request.assert_called_once_with(
        "POST",
        "http://host:6776/apply",
        timeout=3,
        json={
            "order": ["b", "a"],
            "mods": [
                {"hash": "b", "enabled": True, "enabled_options": ["X"]},
                {"hash": "a", "enabled": False, "enabled_options": []},
            ],
        },
    )


@pytest.mark.parametrize(
    "status_code,error_type",
    [(404, "not_found"), (500, "server_error"), (503, "server_error"), (418, "server_error")],
)
def test_status_codes_map_to_error_types(status_code, error_type):
    api = _api(_response(status_code=status_code))
    with pytest.raises(CatalogError) as exc:
        api.list_mods()
    assert exc.value.error_type == error_type
    assert exc.value.status_code == status_code


@pytest.mark.parametrize(
    "error,error_type",
    [
        (requests.exceptions.ConnectionError("refused"), "offline"),
        (requests.exceptions.Timeout("slow"), "timeout"),
        (RuntimeError("boom"), "unknown"),
    ],
)
def test_transport_errors_are_wrapped(error, error_type):
    api = _api(side_effect=error)
    with pytest.raises(CatalogError) as exc:
        api.list_profiles()
    assert exc.value.error_type == error_type


def test_invalid_json_is_reported():
    api = _api(_response(payload=ValueError("not json")))
    with pytest.raises(CatalogError) as exc:
        api.list_mods()
    assert exc.value.error_type == "invalid"
