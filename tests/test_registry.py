# tests/test_registry.py
import pytest

from myip.core.errors import UnknownSourceError
from myip.core.plugin import BasePlugin
from myip.core.registry import PLUGINS, get_plugin, myip, plugin_names
import myip.source as _sources  # noqa: F401  (registers the built-in sources)


@pytest.fixture
def empty_probe_registry(monkeypatch):
    monkeypatch.setitem(PLUGINS, "probe", {})


def test_builtin_sources_are_registered():
    assert plugin_names("source") == ["local", "remote"]


def test_unknown_source_raises():
    with pytest.raises(UnknownSourceError) as excinfo:
        get_plugin("source", "elsewhere")
    assert "does not exist" in str(excinfo.value)


def test_decorator_sets_name_and_version(empty_probe_registry):
    @myip(kind="probe", name="dummy")
    class Dummy(BasePlugin):
        pass

    assert get_plugin("probe", "dummy") is Dummy
    assert Dummy.name == "dummy"
    assert Dummy.version == "0.1.0"


def test_duplicate_registration_is_rejected(empty_probe_registry):
    @myip(kind="probe", name="twice")
    class First(BasePlugin):
        pass

    with pytest.raises(ValueError):
        @myip(kind="probe", name="twice")
        class Second(BasePlugin):
            pass


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        myip(kind="dataset")


def test_non_plugin_class_is_rejected(empty_probe_registry):
    with pytest.raises(TypeError):
        @myip(kind="probe")
        class NotAPlugin:
            pass


def test_unknown_probe_raises_key_error():
    with pytest.raises(KeyError) as excinfo:
        get_plugin("probe", "carrier-pigeon")
    assert not isinstance(excinfo.value, UnknownSourceError)
