# tests/test_registry.py

import pytest

import flextime
from flextime.api import set_registry
from flextime.bootstrap import build_registry
from flextime.core.config import Settings


@pytest.fixture(autouse=True)
def fresh_registry():
    set_registry(build_registry())
    yield
    set_registry(build_registry())


def test_register_and_use_kernel():
    k = flextime.ParserKernel("compact", ("YYYYMMDD",))
    flextime.register_kernel(k)
    assert "compact" in flextime.list_kernels()
    assert flextime.parse("20240315", flextime.get_kernel("compact")) == flextime.parse("2024-03-15")


def test_register_refuses_duplicates():
    with pytest.raises(KeyError):
        flextime.register_kernel(flextime.ParserKernel("default", ("YYYY",)))
    flextime.register_kernel(flextime.ParserKernel("default", ("YYYY",)), overwrite=True)
    assert flextime.get_kernel("default").patterns == ("YYYY",)


def test_unknown_kernel():
    with pytest.raises(KeyError):
        flextime.get_kernel("nope")


def test_default_kernel_follows_settings():
    old = flextime.get_settings()
    flextime.set_settings(old.tweak(default_kernel="clock"))
    try:
        assert flextime.get_kernel().name == "clock"
        assert flextime.parse("08.30") == flextime.parse("08:30", "HH:mm")
    finally:
        flextime.set_settings(old)


def test_settings_validation():
    with pytest.raises(ValueError):
        Settings(max_split_steps=0)
