"""Hook execution manager for wp-essentials.

This module provides the HookManager class which dispatches extension points to
the callbacks in a HookRegistry. Filters chain a value through every callback;
actions run each callback for its side effect. Dispatch is synchronous and runs
inside the caller's request handling.
"""

from typing import Any

from ..context import RequestContext
from ..core.logging import get_logger
from ..exceptions import RequestTerminated
from .base import Hook
from .events import HookEvent
from .registry import HookRegistry


class HookManager:
    """Dispatches filters and actions registered in a HookRegistry."""

    def __init__(self, registry: HookRegistry):
        """Initialize the hook manager.

        Args:
            registry: The hook registry to get hooks from
        """
        self._registry = registry
        self._logger = get_logger(__name__)

    @property
    def registry(self) -> HookRegistry:
        return self._registry

    def apply_filters(
        self,
        event: HookEvent,
        value: Any,
        *args: Any,
        context: RequestContext | None = None,
    ) -> Any:
        """Pass ``value`` through every callback registered on ``event``.

        Each callback receives the previous callback's return value followed by
        the extra ``args``, truncated to its ``accepted_args``. Exceptions raised
        by a callback propagate to the caller.

        Args:
            event: The extension point to apply
            value: The initial value
            *args: Additional read-only arguments for the callbacks
            context: Request context for callbacks registered ``with_context``

        Returns:
            The value returned by the last callback, or ``value`` if none ran
        """
        for hook in self._registry.get_hooks(event):
            value = self._invoke(hook, (value, *args), context)
        return value

    def do_action(
        self,
        event: HookEvent,
        *args: Any,
        context: RequestContext | None = None,
    ) -> None:
        """Run every callback registered on ``event`` for its side effect.

        A failing action is logged and the remaining actions still run.
        RequestTerminated always propagates.

        Args:
            event: The extension point to fire
            *args: Arguments passed to each callback
            context: Request context for callbacks registered ``with_context``
        """
        for hook in self._registry.get_hooks(event):
            try:
                self._invoke(hook, args, context)
            except RequestTerminated:
                raise
            except Exception as e:
                self._logger.error(
                    "action_failed",
                    hook=hook.name,
                    hook_event=event.value,
                    error=str(e),
                )

    def has_hooks(self, event: HookEvent) -> bool:
        return bool(self._registry.get_hooks(event))

    def _invoke(
        self, hook: Hook, args: tuple[Any, ...], context: RequestContext | None
    ) -> Any:
        call_args = args[: hook.accepted_args]
        if hook.with_context:
            return hook.callback(*call_args, context=context or RequestContext())
        return hook.callback(*call_args)
