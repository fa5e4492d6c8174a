"""Base definitions for hook registrations."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .events import HookEvent


DEFAULT_PRIORITY = 10


class HookKind(str, Enum):
    """How the manager dispatches a registration"""

    FILTER = "filter"
    ACTION = "action"


@dataclass(frozen=True)
class Hook:
    """A single callback registered on an extension point.

    Attributes:
        event: Extension point the callback is attached to
        callback: The callable to run
        name: Identifier used for removal and diagnostics
        kind: Filter (chained value) or action (side effect only)
        priority: Lower runs first; ties keep registration order
        accepted_args: Number of positional arguments passed to the callback
        with_context: Pass the per-request RequestContext as ``context=``
    """

    event: HookEvent
    callback: Callable[..., Any]
    name: str
    kind: HookKind = HookKind.FILTER
    priority: int = DEFAULT_PRIORITY
    accepted_args: int = 1
    with_context: bool = False
