"""Central registry for all hooks"""

from collections import defaultdict
from collections.abc import Callable
from typing import Any

from ..core.logging import get_logger
from ..exceptions import InvalidHookError
from .base import DEFAULT_PRIORITY, Hook, HookKind
from .events import HookEvent


class HookRegistry:
    """Central registry for all hooks"""

    def __init__(self) -> None:
        self._hooks: dict[HookEvent, list[Hook]] = defaultdict(list)
        self._logger = get_logger(__name__)

    def register(self, hook: Hook) -> Hook:
        """Register a hook for its event"""
        if not callable(hook.callback):
            raise InvalidHookError(f"Callback for {hook.name} is not callable")
        if hook.accepted_args < 1:
            raise InvalidHookError(
                f"{hook.name} must accept at least one argument, got {hook.accepted_args}"
            )

        hooks = self._hooks[hook.event]
        hooks.append(hook)
        # sort is stable, so equal priorities keep registration order
        hooks.sort(key=lambda h: h.priority)
        self._logger.debug(
            "hook_registered",
            hook=hook.name,
            hook_event=hook.event.value,
            kind=hook.kind.value,
            priority=hook.priority,
        )
        return hook

    def add_filter(
        self,
        event: HookEvent,
        callback: Callable[..., Any],
        *,
        name: str | None = None,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
        with_context: bool = False,
    ) -> Hook:
        """Register a value-transforming callback"""
        return self.register(
            Hook(
                event=event,
                callback=callback,
                name=name or _callback_name(callback),
                kind=HookKind.FILTER,
                priority=priority,
                accepted_args=accepted_args,
                with_context=with_context,
            )
        )

    def add_action(
        self,
        event: HookEvent,
        callback: Callable[..., Any],
        *,
        name: str | None = None,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
        with_context: bool = False,
    ) -> Hook:
        """Register a side-effect callback"""
        return self.register(
            Hook(
                event=event,
                callback=callback,
                name=name or _callback_name(callback),
                kind=HookKind.ACTION,
                priority=priority,
                accepted_args=accepted_args,
                with_context=with_context,
            )
        )

    def remove(self, event: HookEvent, name: str) -> bool:
        """Remove every registration with ``name`` from ``event``.

        Returns:
            True if anything was removed
        """
        hooks = self._hooks.get(event, [])
        kept = [h for h in hooks if h.name != name]
        removed = len(hooks) - len(kept)
        if removed:
            self._hooks[event] = kept
            self._logger.info("hook_removed", hook=name, hook_event=event.value)
        else:
            self._logger.debug("hook_not_registered", hook=name, hook_event=event.value)
        return bool(removed)

    def has(self, event: HookEvent, name: str) -> bool:
        return any(h.name == name for h in self._hooks.get(event, []))

    def get_hooks(self, event: HookEvent) -> list[Hook]:
        """Get all hooks for an event in dispatch order"""
        return list(self._hooks.get(event, []))

    def all_hooks(self) -> list[Hook]:
        """Every registration, grouped by event in enum order"""
        return [h for event in HookEvent for h in self._hooks.get(event, [])]


def _callback_name(callback: Callable[..., Any]) -> str:
    name = getattr(callback, "__name__", None)
    if name is None:
        # functools.partial and similar wrappers
        name = getattr(getattr(callback, "func", None), "__name__", None)
    return name or repr(callback)
