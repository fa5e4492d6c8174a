"""Per-request and per-site inputs handed to callbacks explicitly."""

from dataclasses import dataclass
from urllib.parse import urlsplit


@dataclass(frozen=True)
class RequestContext:
    """Immutable view of the request a callback runs for.

    Attributes:
        query_string: Raw query string as received on the transport, without ``?``
        request_uri: Path plus query string as requested by the client
        is_admin: Whether the request targets the administrative area
    """

    query_string: str = ""
    request_uri: str = ""
    is_admin: bool = False

    @property
    def path(self) -> str:
        return urlsplit(self.request_uri).path or "/"

    @classmethod
    def from_uri(cls, request_uri: str, *, is_admin: bool = False) -> "RequestContext":
        """Build a context from a request URI, deriving the query string."""
        return cls(
            query_string=urlsplit(request_uri).query,
            request_uri=request_uri,
            is_admin=is_admin,
        )


@dataclass(frozen=True)
class Capabilities:
    """Third-party plugins known to be active on the host."""

    acf_active: bool = False
    gravity_forms_active: bool = False
    gravity_forms_html5: bool = False
