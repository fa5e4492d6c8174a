"""Preview metadata for SVG attachments in the media library."""

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from ..options import OptionStore
from .uploads import SVG_MIME_TYPE


# Sizes the host offers before image_size_names_choose filters them
DEFAULT_IMAGE_SIZE_NAMES: dict[str, str] = {
    "thumbnail": "Thumbnail",
    "medium": "Medium",
    "large": "Large",
    "full": "Full Size",
}

DEFAULT_DIMENSION = 2000


def svg_attachment_sizes(
    response: MutableMapping[str, Any],
    *,
    size_names: Callable[[], Mapping[str, str]],
    options: OptionStore,
    default_size: int = DEFAULT_DIMENSION,
) -> MutableMapping[str, Any]:
    """Give SVG attachments a size entry per registered image size.

    Vector files have no generated sub-sizes, so every size points at the
    original file. Non-SVG attachments are returned unchanged.

    Args:
        response: Attachment description with at least ``mime`` and ``url``
        size_names: Returns the registered size keys mapped to their labels
        options: Source of stored ``<size>_size_w``/``<size>_size_h`` options
        default_size: Dimension used when no option is stored

    Returns:
        The same mapping, with ``sizes`` and ``icon`` set for SVGs
    """
    if response.get("mime") != SVG_MIME_TYPE:
        return response

    url = response["url"]
    sizes: dict[str, dict[str, Any]] = {}
    for size in size_names():
        # height reads the _w option and width the _h option, as stored by
        # earlier releases; left as-is so existing previews keep their shape
        sizes[size] = {
            "height": options.get_option(f"{size}_size_w", default_size),
            "width": options.get_option(f"{size}_size_h", default_size),
            "url": url,
            "orientation": "portrait",
        }

    response["sizes"] = sizes
    response["icon"] = url
    return response
