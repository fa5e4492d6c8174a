"""Bind the essentials callbacks to their extension points.

``register_essentials`` is the single entry point a host calls at startup. It
honours the feature toggles in Settings and only registers third-party
workarounds for plugins reported active in ``settings.integrations``.
"""

from collections.abc import Mapping, MutableMapping
from functools import partial
from typing import Any

from .config import Settings, get_settings
from .core.logging import get_logger
from .filters import (
    DEFAULT_IMAGE_SIZE_NAMES,
    acf_load_json_paths,
    acf_save_json_path,
    allow_svg_mime,
    block_author_query,
    block_author_redirect,
    disable_field_autocomplete,
    disable_form_autocomplete,
    disable_rest_api,
    disable_rest_jsonp,
    disable_xmlrpc,
    hide_generator,
    sanitize_svg_upload,
    svg_attachment_sizes,
)
from .filters.hardening import GENERATOR_ACTION
from .hooks import Hook, HookEvent, HookManager, HookRegistry
from .options import MappingOptionStore, OptionStore
from .svg import Sanitizer, SvgSanitizer


logger = get_logger(__name__)


def register_essentials(
    registry: HookRegistry,
    settings: Settings | None = None,
    *,
    manager: HookManager | None = None,
    sanitizer: SvgSanitizer | None = None,
    options: OptionStore | None = None,
) -> list[Hook]:
    """Register every enabled callback on ``registry``.

    Args:
        registry: Registry owned by the host
        settings: Configuration; defaults to ``get_settings()``
        manager: Manager used to resolve image size names for SVG previews
        sanitizer: SVG sanitizer; defaults to one built from ``settings.svg``
        options: Stored options for preview sizes; defaults to ``settings.media.options``

    Returns:
        The registrations that were made, in order
    """
    if settings is None:
        settings = get_settings()
    if manager is None:
        manager = HookManager(registry)
    features = settings.features
    capabilities = settings.capabilities
    hooks: list[Hook] = []

    if features.hide_generator:
        registry.remove(HookEvent.WP_HEAD, GENERATOR_ACTION)
        hooks.append(registry.add_filter(HookEvent.THE_GENERATOR, hide_generator))

    if features.disable_xmlrpc:
        hooks.append(registry.add_filter(HookEvent.XMLRPC_ENABLED, disable_xmlrpc))

    if features.disable_rest_api:
        hooks.append(registry.add_filter(HookEvent.REST_ENABLED, disable_rest_api))
        hooks.append(
            registry.add_filter(HookEvent.REST_JSONP_ENABLED, disable_rest_jsonp)
        )

    if features.block_user_enumeration:
        hooks.append(
            registry.add_action(
                HookEvent.INIT, block_author_query, with_context=True
            )
        )
        hooks.append(
            registry.add_filter(
                HookEvent.REDIRECT_CANONICAL, block_author_redirect, accepted_args=2
            )
        )

    if features.svg_uploads:
        hooks.extend(
            _register_svg_support(registry, manager, settings, sanitizer, options)
        )

    if features.acf_json_paths and capabilities.acf_active:
        fields_dir = settings.fields_dir
        hooks.append(
            registry.add_filter(
                HookEvent.ACF_SAVE_JSON,
                partial(acf_save_json_path, fields_dir=fields_dir),
                name="acf_save_json_path",
            )
        )
        hooks.append(
            registry.add_filter(
                HookEvent.ACF_LOAD_JSON,
                partial(acf_load_json_paths, fields_dir=fields_dir),
                name="acf_load_json_paths",
            )
        )

    if features.gravity_forms_autocomplete and capabilities.gravity_forms_active:
        html5 = capabilities.gravity_forms_html5
        hooks.append(
            registry.add_filter(
                HookEvent.GFORM_FORM_TAG,
                partial(disable_form_autocomplete, html5_enabled=html5),
                name="disable_form_autocomplete",
                with_context=True,
            )
        )
        hooks.append(
            registry.add_filter(
                HookEvent.GFORM_FIELD_CONTENT,
                partial(disable_field_autocomplete, html5_enabled=html5),
                name="disable_field_autocomplete",
                with_context=True,
            )
        )

    logger.info(
        "essentials_registered",
        hooks=len(hooks),
        acf_active=capabilities.acf_active,
        gravity_forms_active=capabilities.gravity_forms_active,
    )
    return hooks


def _register_svg_support(
    registry: HookRegistry,
    manager: HookManager,
    settings: Settings,
    sanitizer: SvgSanitizer | None,
    options: OptionStore | None,
) -> list[Hook]:
    sanitizer = sanitizer or Sanitizer(
        minify=settings.svg.minify,
        remove_remote_references=settings.svg.remove_remote_references,
    )
    options = options or MappingOptionStore(settings.media.options)

    def size_names() -> Mapping[str, str]:
        return manager.apply_filters(
            HookEvent.IMAGE_SIZE_NAMES_CHOOSE, dict(DEFAULT_IMAGE_SIZE_NAMES)
        )

    def prepare_svg_attachment(
        response: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        return svg_attachment_sizes(
            response,
            size_names=size_names,
            options=options,
            default_size=settings.media.default_size,
        )

    return [
        registry.add_filter(HookEvent.UPLOAD_MIMES, allow_svg_mime),
        registry.add_filter(
            HookEvent.HANDLE_UPLOAD_PREFILTER,
            partial(
                sanitize_svg_upload,
                sanitizer=sanitizer,
                error_message=settings.svg.error_message,
            ),
            name="sanitize_svg_upload",
        ),
        registry.add_filter(
            HookEvent.PREPARE_ATTACHMENT_FOR_JS,
            prepare_svg_attachment,
            name="svg_attachment_sizes",
        ),
    ]
