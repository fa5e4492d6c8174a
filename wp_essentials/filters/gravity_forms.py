"""Disable browser autocomplete on Gravity Forms markup.

Both filters only act on front-end requests and when the plugin renders HTML5
output.
"""

import re

from ..context import RequestContext


AUTOCOMPLETE_OFF = 'autocomplete="off"'

_FORM_TAG_RE = re.compile(r"(<form\b[^>]*)>")
_FIELD_TAG_RE = re.compile(r"<(input|textarea)\b")


def disable_form_autocomplete(
    form_tag: str, *, context: RequestContext, html5_enabled: bool
) -> str:
    """Add ``autocomplete="off"`` before the closing bracket of a ``<form>`` tag."""
    if context.is_admin or not html5_enabled:
        return form_tag

    return _FORM_TAG_RE.sub(rf"\1 {AUTOCOMPLETE_OFF}>", form_tag, count=1)


def disable_field_autocomplete(
    field_content: str, *, context: RequestContext, html5_enabled: bool
) -> str:
    """Add ``autocomplete="off"`` to every input and textarea in a field."""
    if context.is_admin or not html5_enabled:
        return field_content

    return _FIELD_TAG_RE.sub(rf"<\1 {AUTOCOMPLETE_OFF} ", field_content)
