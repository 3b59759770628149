import pytest

from enginecore.singleton import Singleton


class Counter(Singleton):
    created = 0

    def __init__(self):
        type(self).created += 1
        self.value = 0


class Other(Singleton):
    pass


@pytest.fixture(autouse=True)
def _reset():
    Singleton.destroy()
    Counter.destroy()
    Other.destroy()
    Counter.created = 0
    yield
    Counter.destroy()
    Other.destroy()
    Singleton.destroy()


def test_get_returns_same_instance():
    first = Counter.get()
    first.value = 7
    assert Counter.get().value == 7
    assert Counter.created == 1
    base = Singleton.get()
    base.marker = "base"
    assert Singleton.get().marker == "base"


def test_state_persists_between_gets():
    Singleton.get().value = 42
    assert Singleton.get().value == 42


def test_destroy_creates_fresh_instance():
    first = Counter.get()
    first.value = 9
    Counter.destroy()
    second = Counter.get()
    assert second.value == 0
    assert Counter.created == 2

    Singleton.get().marker = "old"
    Singleton.destroy()
    assert getattr(Singleton.get(), "marker", "missing") == "missing"


def test_subclasses_have_separate_instances():
    Counter.get().value = 5
    Other.get().tag = "other"
    Singleton.get().marker = "base"
    assert type(Counter.get()).__name__ == "Counter"
    assert type(Other.get()).__name__ == "Other"
    assert type(Singleton.get()).__name__ == "Singleton"
    assert Counter.get().value == 5
    assert getattr(Other.get(), "value", "missing") == "missing"
    assert getattr(Singleton.get(), "tag", "missing") == "missing"
    assert getattr(Counter.get(), "marker", "missing") == "missing"
    assert Other.get().tag == "other"


def test_destroy_without_instance_is_harmless():
    Singleton.destroy()
    Singleton.destroy()
    instance = Singleton.get()
    instance.value = 3
    assert type(instance).__name__ == "Singleton"
    assert Singleton.get().value == 3