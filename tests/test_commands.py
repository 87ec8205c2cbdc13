import pytest

from uking_mod_manager.core import InvalidIndex, Mod, ModMeta, ModOption, ModStateController, OptionGroup, StaticCatalogAPI
from uking_mod_manager.core.commands import (
    Apply,
    ClearSelection,
    Deselect,
    MoveSelected,
    Reload,
    Reorder,
    Select,
    SelectAlso,
    SetOptions,
    Toggle,
)


def _catalog() -> StaticCatalogAPI:
    mods = [
        Mod(hash=f"h{name}", meta=ModMeta(name=name, option_groups=[OptionGroup("G", options=[ModOption("X")])]))
        for name in "ABCD"
    ]
    return StaticCatalogAPI(mods)


def test_dispatch_routes_every_command():
    catalog = _catalog()
    controller = ModStateController(catalog)

    controller.dispatch(Toggle("hA"))
    assert controller.snapshot().mods[0].enabled is True

    controller.dispatch(Reorder((3, 1), 1))
    assert [m.name for m in controller.snapshot().mods] == ["A", "B", "D", "C"]

    controller.dispatch(Select(0))
    controller.dispatch(SelectAlso(3))
    assert controller.snapshot().marked_indices == (0, 3)
    controller.dispatch(MoveSelected(2))
    assert [m.name for m in controller.snapshot().mods] == ["B", "D", "A", "C"]

    controller.dispatch(Deselect(2))
    assert controller.snapshot().marked_indices == (3,)
    controller.dispatch(ClearSelection())
    assert controller.snapshot().selected_index is None

    controller.dispatch(SetOptions("hB", ("X",)))
    assert controller.snapshot().mods[0].enabled_options == ("X",)

    controller.dispatch(Apply())
    assert controller.dirty is False
    assert [m.name for m in catalog.applied[-1]] == ["B", "D", "A", "C"]

    controller.dispatch(Toggle("hC"))
    controller.dispatch(Reload())
    assert controller.dirty is False
    assert controller.snapshot().mods[3].enabled is False


def test_dispatch_propagates_controller_errors():
    controller = ModStateController(_catalog())
    with pytest.raises(InvalidIndex):
        controller.dispatch(Select(10))


def test_dispatch_rejects_unknown_command():
    controller = ModStateController(_catalog())
    with pytest.raises(TypeError):
        controller.dispatch("toggle")
