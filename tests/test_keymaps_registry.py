import pytest

from canvas_editor.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "edit.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(key: str = "F1", action_id: str = "edit.test") -> Binding:
    return Binding(key=key, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding()

    registry.register_binding(binding)

    assert registry.binding_for("F1") == binding
    assert registry.binding_for("F2") is None


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_action(make_action("edit.other"))
    registry.register_binding(make_binding())

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(action_id="edit.other"))


def test_register_same_binding_twice_is_not_a_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding())
    registry.register_binding(make_binding())

    assert registry.binding_for("F1") == make_binding()


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_action(make_action("edit.other"))
    first = make_binding()
    second = make_binding(action_id="edit.other")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert registry.binding_for("F1") == second


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(action_id="missing.action"))


def test_register_action_rejects_duplicates() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_action_ref_validates_handler() -> None:
    with pytest.raises(TypeError):
        ActionRef(id="edit.bad", handler="not callable")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        ActionRef(id="", handler=lambda: None)


def test_load_default_keymaps_registers_navigation_keys() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    for action_id in (
        "edit.backspace",
        "edit.newline",
        "cursor.left",
        "cursor.right",
        "cursor.up",
        "cursor.down",
    ):
        assert registry.get_action(action_id).id == action_id
    for key in ("BackSpace", "Return", "Enter", "Left", "Right", "Up", "Down"):
        assert registry.binding_for(key) is not None
