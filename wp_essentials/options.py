"""Read-only access to the host's stored options."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OptionStore(Protocol):
    """Protocol for option lookups with a fallback value."""

    def get_option(self, name: str, default: Any = None) -> Any:
        ...


class MappingOptionStore:
    """OptionStore backed by a plain mapping."""

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self._options = dict(options or {})

    def get_option(self, name: str, default: Any = None) -> Any:
        return self._options.get(name, default)
