"""Tests for the hook registry."""
import asyncio

import pytest

from pagemeta.exceptions import ValidationError
from pagemeta.hooks import HookRegistry


@pytest.mark.unit
class TestHookRegistry:
    """Test hook, pre-hook and listener invocation."""

    def test_hooks_run_in_registration_order(self):
        registry = HookRegistry()
        calls = []

        async def second(value):
            await asyncio.sleep(0)
            calls.append(("second", value))

        registry.hook("build", lambda value: calls.append(("first", value)))
        registry.hook("build", second)
        registry.hook("build", lambda value: calls.append(("third", value)))

        asyncio.run(registry.run("build", 1))
        assert calls == [("first", 1), ("second", 1), ("third", 1)]

    def test_run_without_hooks_is_noop(self):
        asyncio.run(HookRegistry().run("missing"))

    def test_hook_errors_propagate(self):
        registry = HookRegistry()

        def fail(_):
            raise RuntimeError("boom")

        registry.hook("build", fail)
        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(registry.run("build", None))

    def test_pre_hooks_can_mutate_arguments(self):
        registry = HookRegistry()
        state = {"head": ""}
        registry.pre("render", lambda s: s.update(head=s["head"] + "a"))
        registry.pre("render", lambda s: s.update(head=s["head"] + "b"))

        registry.run_pre("render", state)
        assert state["head"] == "ab"

    def test_async_pre_hook_is_rejected(self):
        registry = HookRegistry()

        async def late(_):
            return None

        registry.pre("render", late)
        with pytest.raises(ValidationError):
            registry.run_pre("render", {})

    def test_emit_notifies_listeners(self):
        registry = HookRegistry()
        seen = []
        registry.on("done", seen.append)
        registry.on("done", lambda value: seen.append(value * 2))

        registry.emit("done", 3)
        assert seen == [3, 6]

    def test_off_removes_callback(self):
        registry = HookRegistry()
        seen = []
        registry.on("done", seen.append)
        registry.off("done", seen.append)

        registry.emit("done", 1)
        assert seen == []

    def test_clear_drops_everything(self):
        registry = HookRegistry()
        seen = []
        registry.on("done", seen.append)
        registry.pre("render", seen.append)
        registry.clear()

        registry.emit("done", 1)
        registry.run_pre("render", 1)
        assert seen == []
