"""Hook pipeline for wp-essentials.

This package provides the minimal extension-point machinery the callbacks are
registered on. The embedding host owns the registry; callbacks only contribute
to it.

Key components:
- HookEvent: Enumeration of the extension points used by the callbacks
- Hook: A single callback registration
- HookRegistry: Ordered registrations per extension point
- HookManager: Filter chaining and action firing
"""

from .base import DEFAULT_PRIORITY, Hook, HookKind
from .events import HookEvent
from .manager import HookManager
from .registry import HookRegistry


__all__ = [
    "DEFAULT_PRIORITY",
    "Hook",
    "HookEvent",
    "HookKind",
    "HookManager",
    "HookRegistry",
]
