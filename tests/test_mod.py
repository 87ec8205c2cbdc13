import dataclasses

import pytest

from uking_mod_manager.core import LogRecord, Mod, ModMeta, ModOption, OptionGroup


def _mod() -> Mod:
    groups = [OptionGroup("Textures", options=[ModOption("HD", "High resolution"), ModOption("SD")])]
    return Mod(
        hash="deadbeefcafe",
        meta=ModMeta(name="Linkle", version="1.2", category="Customization", author="Someone", option_groups=groups),
        enabled_options=["HD"],
    )


def test_dict_round_trip_keeps_options():
    mod = _mod()
    again = Mod.from_dict(mod.to_dict())
    assert again == mod
    assert again.meta.option_groups[0].options[0].description == "High resolution"


def test_from_dict_defaults():
    mod = Mod.from_dict({"hash": 12, "meta": {"name": "Bare"}})
    assert mod.hash == "12"
    assert mod.enabled is False
    assert mod.enabled_options == ()
    assert mod.meta.url is None
    assert mod.meta.author == "Unknown"


def test_with_enabled_returns_copy():
    mod = _mod()
    enabled = mod.with_enabled(True)
    assert enabled.enabled is True
    assert mod.enabled is False
    assert enabled.hash == mod.hash
    assert enabled.enabled_options == ("HD",)


def test_mods_are_immutable():
    mod = _mod()
    with pytest.raises(dataclasses.FrozenInstanceError):
        mod.enabled = True
    with pytest.raises(AttributeError):
        mod.enabled_options.append("SD")
    assert isinstance(mod.meta.option_groups, tuple)
    assert isinstance(mod.meta.option_groups[0].options, tuple)


def test_state_eq_ignores_option_order():
    mod = _mod()
    assert mod.state_eq(mod.with_options(["HD"]))
    assert not mod.state_eq(mod.with_options(["HD", "SD"]))
    assert not mod.state_eq(mod.with_enabled(True))
    two = mod.with_options(["SD", "HD"])
    assert two.state_eq(mod.with_options(["HD", "SD"]))


def test_repr_and_log_record_str():
    assert repr(_mod()) == "Mod(Linkle#deadbeef)"
    assert str(LogRecord("09:15:00", "INFO", "Started")) == "[09:15:00] INFO Started"
