"""Named extension points for the application.

Three kinds of callbacks can be registered under a name:

- hooks: async-or-sync extension callbacks awaited one after another by ``run``
- pre-hooks: synchronous callbacks fired right before an event by ``run_pre``
- listeners: synchronous observers notified by ``emit``

All of them are invoked in registration order. Exceptions raised by a
callback propagate to the caller.
"""
import inspect
import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List

from pagemeta.exceptions import ValidationError

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]


class HookRegistry:
    """Registry of named callbacks."""

    def __init__(self):
        self._hooks: Dict[str, List[Callback]] = defaultdict(list)
        self._pre: Dict[str, List[Callback]] = defaultdict(list)
        self._listeners: Dict[str, List[Callback]] = defaultdict(list)

    def hook(self, name: str, callback: Callback) -> Callback:
        """Register an extension callback for ``name``."""
        self._hooks[name].append(callback)
        return callback

    def pre(self, name: str, callback: Callback) -> Callback:
        """Register a synchronous callback fired before event ``name``."""
        self._pre[name].append(callback)
        return callback

    def on(self, name: str, listener: Callback) -> Callback:
        """Subscribe ``listener`` to event ``name``."""
        self._listeners[name].append(listener)
        return listener

    def off(self, name: str, callback: Callback) -> None:
        """Remove ``callback`` from every list registered under ``name``."""
        for registry in (self._hooks, self._pre, self._listeners):
            if callback in registry.get(name, []):
                registry[name].remove(callback)

    async def run(self, name: str, *args: Any) -> None:
        """Invoke the extension callbacks for ``name``, awaiting each in turn."""
        for callback in list(self._hooks.get(name, [])):
            result = callback(*args)
            if inspect.isawaitable(result):
                await result

    def run_pre(self, name: str, *args: Any) -> None:
        """Invoke the pre-event callbacks for ``name``."""
        for callback in list(self._pre.get(name, [])):
            result = callback(*args)
            if inspect.isawaitable(result):
                # Close the coroutine so it doesn't warn about never being awaited
                if inspect.iscoroutine(result):
                    result.close()
                raise ValidationError(f"Pre-hook for '{name}' must be synchronous: {callback!r}")

    def emit(self, name: str, *args: Any) -> None:
        """Notify the listeners of event ``name``."""
        listeners = list(self._listeners.get(name, []))
        logger.debug(f"Emitting '{name}' to {len(listeners)} listeners")
        for listener in listeners:
            listener(*args)

    def clear(self) -> None:
        """Drop every registered callback."""
        self._hooks.clear()
        self._pre.clear()
        self._listeners.clear()


# Shared registry used by the application
hooks = HookRegistry()
