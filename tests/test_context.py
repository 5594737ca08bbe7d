import threading

import pytest

from ashmow.context import Context, ContextInfo, ContextRegistry, Service, Updatable


class Counter(Updatable):
    def __init__(self, log=None, label=None):
        self.count = 0
        self.log = log
        self.label = label

    def update(self):
        self.count += 1
        if self.log is not None:
            self.log.append(self.label)


def test_run_once_updates_in_insertion_order():
    log = []
    context = Context()
    context.add_updatable(Counter(log, "a"))
    context.add_updatable(Counter(log, "b"))
    context.run_once()
    context.run_once()
    assert log == ["a", "b", "a", "b"]


def test_duplicate_updatable_added_once():
    counter = Counter()
    context = Context()
    context.add_updatable(counter)
    context.add_updatable(counter)
    context.run_once()
    assert counter.count == 1
    assert context.updatables == (counter,)


def test_remove_drops_updatable_and_later_ones():
    first, second, third = Counter(), Counter(), Counter()
    context = Context()
    for item in (first, second, third):
        context.add_updatable(item)
    context.remove_updatable(second)
    assert context.updatables == (first,)


def test_remove_unknown_updatable_keeps_list():
    counter = Counter()
    context = Context()
    context.add_updatable(counter)
    context.remove_updatable(Counter())
    assert context.updatables == (counter,)


def test_started_context_updates_in_background():
    hit = threading.Event()

    class Flag(Updatable):
        def update(self):
            hit.set()

    context = Context(period=0.01)
    context.add_updatable(Flag())
    context.start()
    try:
        assert hit.wait(2.0)
        assert context.running
    finally:
        context.stop()
        context.join(2.0)
    assert not context.running


def test_context_info_defaults_to_zero():
    assert Context().info == ContextInfo(0.0, 0.0, 0.0)


def test_abstract_service_cannot_be_created():
    with pytest.raises(TypeError):
        Service()


def test_register_context_returns_same_context_for_name():
    registry = ContextRegistry()
    first = registry.register_context("nav")
    assert registry.register_context("nav") is first
    assert registry.register_context("route") is not first


def test_registry_lists_contexts_by_name():
    registry = ContextRegistry()
    for name in ("timer", "event", "nav"):
        registry.register_context(name)
    assert list(registry.contexts) == ["event", "nav", "timer"]


def test_registry_start_and_stop_order(capsys):
    registry = ContextRegistry(context_period=0.01)
    registry.register_context("b")
    registry.register_context("a")
    registry.start()
    try:
        assert all(context.running for context in registry.contexts.values())
        registry.stop()
    finally:
        registry.close(2.0)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Starting thread: a",
        "Starting thread: b",
        "Stopping thread: b",
        "Stopping thread: a",
    ]
    assert not any(context.running for context in registry.contexts.values())