import logging

import pytest

from countable.registry import BindingRegistry
from countable.surfaces import TextSurface
from tests.utils import RecordingCallback, WarningSink, make_selector_map


def test_enable_live_reports_initial_count_and_each_change():
    selectors, surfaces = make_selector_map(field="Hello world")
    registry = BindingRegistry(selectors)
    callback = RecordingCallback()

    assert registry.enable_live("field", callback) is registry
    assert [r.words for r in callback.results] == [2]

    surfaces["field"].text = "One two three"
    assert [r.words for r in callback.results] == [2, 3]
    assert callback.calls[-1][0] is surfaces["field"]
    assert registry.is_enabled(surfaces["field"])


def test_enabling_twice_keeps_a_single_binding():
    selectors, surfaces = make_selector_map(field="text")
    registry = BindingRegistry(selectors)
    callback = RecordingCallback()

    registry.enable_live("field", callback).enable_live("field", callback)
    callback.calls.clear()
    surfaces["field"].text = "new text"

    assert len(callback.calls) == 1
    assert len(registry) == 1
    assert surfaces["field"].handler_count == 1


def test_rebinding_replaces_config():
    selectors, surfaces = make_selector_map(field="a\nb")
    registry = BindingRegistry(selectors)
    callback = RecordingCallback()

    registry.enable_live("field", callback)
    registry.enable_live("field", callback, {"hardReturns": True})
    callback.calls.clear()
    surfaces["field"].notify()

    assert [r.paragraphs for r in callback.results] == [1]
    binding = registry.binding_for(surfaces["field"])
    assert binding is not None and binding.config.hard_returns


def test_disable_live_detaches_handler():
    selectors, surfaces = make_selector_map(field="text")
    registry = BindingRegistry(selectors)
    callback = RecordingCallback()

    registry.enable_live("field", callback).disable_live("field")
    callback.calls.clear()
    surfaces["field"].text = "more text"

    assert not registry.is_enabled(surfaces["field"])
    assert callback.calls == []
    assert surfaces["field"].handler_count == 0


def test_disable_live_without_binding_is_a_noop():
    selectors, surfaces = make_selector_map(field="text", other="x")
    sink = WarningSink()
    registry = BindingRegistry(selectors, diagnostics=sink)
    registry.enable_live("other", RecordingCallback())

    assert registry.disable_live("field") is registry
    assert sink.messages == []
    assert registry.is_enabled(surfaces["other"])


def test_once_does_not_touch_bindings():
    selectors, surfaces = make_selector_map(a="one", b="two words")
    registry = BindingRegistry(selectors)
    callback = RecordingCallback()

    assert not registry.is_enabled(surfaces["a"])
    registry.once("a, b", callback, {"stripTags": True})
    assert not registry.is_enabled(surfaces["a"])
    assert len(registry) == 0
    assert [(s.name, r.words) for s, r in callback.calls] == [("a", 1), ("b", 2)]

    surfaces["a"].text = "changed"
    assert len(callback.calls) == 2


@pytest.mark.parametrize(
    ("selector", "callback", "expected"),
    [
        (None, RecordingCallback(), ['"None" is not a valid selector']),
        ("", RecordingCallback(), ['"" is not a valid selector']),
        ("missing", RecordingCallback(), ['No elements were found for the selector "missing"']),
        ("field", "nope", ["'nope' is not a valid callback function"]),
    ],
)
def test_invalid_arguments_warn_and_bind_nothing(selector, callback, expected):
    selectors, surfaces = make_selector_map(field="text")
    sink = WarningSink()
    registry = BindingRegistry(selectors, diagnostics=sink)

    assert registry.enable_live(selector, callback) is registry
    assert registry.once(selector, callback) is registry
    assert sink.messages == expected * 2
    assert not registry.last_validation.ok
    assert len(registry) == 0
    assert surfaces["field"].handler_count == 0


def test_disable_live_ignores_callback_validation():
    selectors, _ = make_selector_map(field="text")
    sink = WarningSink()
    registry = BindingRegistry(selectors, diagnostics=sink)

    registry.disable_live("missing")
    assert sink.messages == ['No elements were found for the selector "missing"']
    registry.disable_live("field")
    assert registry.last_validation.ok


def test_default_diagnostics_log_warnings(caplog: pytest.LogCaptureFixture):
    selectors, _ = make_selector_map(field="text")
    registry = BindingRegistry(selectors)

    with caplog.at_level(logging.WARNING, logger="countable.registry"):
        registry.enable_live("missing", RecordingCallback())

    assert "No elements were found" in caplog.text


def test_is_enabled_rejects_absent_or_foreign_values():
    selectors, _ = make_selector_map(field="text")
    registry = BindingRegistry(selectors)
    registry.enable_live("field", RecordingCallback())

    assert registry.is_enabled(None) is False
    assert registry.is_enabled("field") is False
    assert registry.is_enabled(TextSurface("text")) is False


def test_registries_are_independent():
    selectors, surfaces = make_selector_map(field="text")
    first = BindingRegistry(selectors)
    second = BindingRegistry(selectors)

    first.enable_live("field", RecordingCallback())
    assert first.is_enabled(surfaces["field"])
    assert not second.is_enabled(surfaces["field"])


def test_callback_may_disable_binding_reentrantly():
    selectors, surfaces = make_selector_map(field="text")
    registry = BindingRegistry(selectors)
    calls = []

    def callback(surface, result):
        calls.append(result.words)
        if result.words > 1:
            registry.disable_live("field")

    registry.enable_live("field", callback)
    surfaces["field"].text = "two words"
    surfaces["field"].text = "three more words"

    assert calls == [1, 2]
    assert not registry.is_enabled(surfaces["field"])


def test_clear_detaches_every_binding():
    selectors, surfaces = make_selector_map(a="x", b="y")
    registry = BindingRegistry(selectors)
    registry.enable_live("*", RecordingCallback())
    assert len(registry.bindings) == 2

    registry.clear()
    assert len(registry) == 0
    assert all(surface.handler_count == 0 for surface in surfaces.values())


def test_plain_function_resolver_is_accepted():
    surface = TextSurface("hello")
    registry = BindingRegistry(lambda selector: [surface] if selector == "x" else [])
    callback = RecordingCallback()

    registry.enable_live("x", callback)
    assert surface in registry
    assert callback.results[0].characters == 5
