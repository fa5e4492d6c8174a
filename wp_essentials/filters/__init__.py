"""Filter and action callbacks.

Every callback is a plain function taking its inputs explicitly, so it can be
exercised without a host. ``wp_essentials.plugin`` binds them to extension
points.
"""

from .acf import acf_load_json_paths, acf_save_json_path
from .enumeration import block_author_query, block_author_redirect
from .gravity_forms import disable_field_autocomplete, disable_form_autocomplete
from .hardening import disable_rest_api, disable_rest_jsonp, disable_xmlrpc, hide_generator
from .media import DEFAULT_IMAGE_SIZE_NAMES, svg_attachment_sizes
from .uploads import SVG_MIME_TYPE, allow_svg_mime, sanitize_svg_upload


__all__ = [
    "DEFAULT_IMAGE_SIZE_NAMES",
    "SVG_MIME_TYPE",
    "acf_load_json_paths",
    "acf_save_json_path",
    "allow_svg_mime",
    "block_author_query",
    "block_author_redirect",
    "disable_field_autocomplete",
    "disable_form_autocomplete",
    "disable_rest_api",
    "disable_rest_jsonp",
    "disable_xmlrpc",
    "hide_generator",
    "sanitize_svg_upload",
    "svg_attachment_sizes",
]
