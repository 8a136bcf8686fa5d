import pytest

from line_engine.dispatch import DEFAULT_BINDINGS, load_default_keymaps
from line_engine.keymaps import (
    ActionRef,
    Binding,
    KeyEvent,
    KeyKind,
    KeymapConflictError,
    KeymapRegistry,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    kind: KeyKind = KeyKind.HOME,
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, kind=kind, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="key.home")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert registry.binding_for(KeyKind.HOME) == binding
    assert registry.action_for(KeyKind.HOME).id == "core.test"


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="key.home"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="key.home.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["key.home"]


def test_register_binding_replace_drops_previous() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="key.home"))

    registry.register_binding(make_binding(binding_id="key.home.new"), replace=True)

    assert registry.binding_for(KeyKind.HOME).id == "key.home.new"
    assert registry.stats().binding_count == 1


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="key.home"))


def test_duplicate_action_rejected_without_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())
    registry.register_action(make_action(), replace=True)


def test_unregister_binding_frees_key_kind() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="key.home"))
    revision = registry.revision()

    removed = registry.unregister_binding("key.home")

    assert removed is not None
    assert registry.binding_for(KeyKind.HOME) is None
    assert KeyKind.HOME in registry.stats().unbound
    assert registry.revision() > revision
    assert registry.unregister_binding("key.home") is None


def test_default_keymaps_bind_every_key_kind() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.unbound == ()
    assert stats.binding_count == len(DEFAULT_BINDINGS) == len(KeyKind)
    assert registry.get_binding("key.save").kind is KeyKind.SAVE
    assert {binding.kind for binding in registry.iter_bindings()} == set(KeyKind)


def test_key_event_validates_payload() -> None:
    assert KeyEvent.character("a").char == ord("a")
    assert KeyEvent.character(9).token == "\t"
    assert KeyEvent.special("save").kind is KeyKind.SAVE

    with pytest.raises(ValueError):
        KeyEvent(KeyKind.CHARACTER)
    with pytest.raises(ValueError):
        KeyEvent(KeyKind.ENTER, ord("a"))
    with pytest.raises(ValueError):
        KeyEvent.character(256)
    with pytest.raises(ValueError):
        KeyEvent.character("ab")


def test_action_ref_requires_callable() -> None:
    with pytest.raises(TypeError):
        ActionRef(id="broken", handler="not callable")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        ActionRef(id="", handler=lambda: None)
