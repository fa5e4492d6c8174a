"""Guards against discovering user ids through author archive URLs.

Two URL shapes disclose whether a numeric author id exists: the raw
``?author=<id>`` query string, and the canonical redirect the host issues from
that query to the author's permalink. Both end the request outright.
"""

import re

from ..context import RequestContext
from ..core.logging import get_logger
from ..exceptions import RequestTerminated


logger = get_logger(__name__)


AUTHOR_QUERY_RE = re.compile(r"author=([0-9]+)", re.IGNORECASE)
AUTHOR_PERMALINK_RE = re.compile(r"\?author=([0-9]+)(/*)", re.IGNORECASE)


def block_author_query(*, context: RequestContext) -> None:
    """Terminate front-end requests whose query string names an author id.

    Raises:
        RequestTerminated: If the query string contains ``author=<digits>``
    """
    if context.is_admin:
        return

    if AUTHOR_QUERY_RE.search(context.query_string):
        logger.warning(
            "user_enumeration_blocked",
            source="query_string",
            request_uri=context.request_uri,
        )
        raise RequestTerminated("author query")


def block_author_redirect(redirect_url: str, requested_url: str = "") -> str:
    """Refuse the canonical redirect from ``?author=<id>`` to an author permalink.

    Args:
        redirect_url: Target the host proposes to redirect to
        requested_url: URL originally requested by the client

    Returns:
        ``redirect_url`` unchanged when the request is not an author probe

    Raises:
        RequestTerminated: If ``requested_url`` matches ``?author=<digits>``
    """
    if AUTHOR_PERMALINK_RE.search(requested_url):
        logger.warning(
            "user_enumeration_blocked",
            source="canonical_redirect",
            request_uri=requested_url,
        )
        raise RequestTerminated("author canonical redirect")

    return redirect_url
