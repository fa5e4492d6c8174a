"""Upload filters: allow SVG files and sanitize them on the way in."""

from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from ..core.logging import get_logger
from ..svg import SvgSanitizer


logger = get_logger(__name__)


SVG_EXTENSION = "svg"
SVG_MIME_TYPE = "image/svg+xml"


def allow_svg_mime(mimes: MutableMapping[str, str]) -> MutableMapping[str, str]:
    """Add SVG to the extension -> MIME allowlist."""
    mimes[SVG_EXTENSION] = SVG_MIME_TYPE
    return mimes


def sanitize_svg_upload(
    upload: MutableMapping[str, Any],
    *,
    sanitizer: SvgSanitizer,
    error_message: str,
) -> MutableMapping[str, Any]:
    """Sanitize an uploaded SVG in place before the host stores it.

    The temporary file is rewritten with the sanitized markup. When the
    sanitizer rejects the document the file is left untouched and
    ``upload["error"]`` is set, which makes the host refuse the upload.

    Args:
        upload: Upload descriptor with ``type`` and ``tmp_name`` keys
        sanitizer: Sanitizer returning clean markup or a falsy value
        error_message: Message shown to the user on rejection

    Returns:
        The same descriptor object
    """
    if upload.get("type") != SVG_MIME_TYPE:
        return upload

    tmp_path = Path(upload["tmp_name"])
    dirty = tmp_path.read_bytes()
    clean = sanitizer.sanitize(dirty)

    if not clean:
        logger.warning(
            "svg_upload_rejected",
            filename=upload.get("name"),
            tmp_name=str(tmp_path),
        )
        upload["error"] = error_message
        return upload

    tmp_path.write_text(clean, encoding="utf-8")
    logger.info(
        "svg_upload_sanitized",
        filename=upload.get("name"),
        original_bytes=len(dirty),
        sanitized_bytes=len(clean.encode("utf-8")),
    )
    return upload
