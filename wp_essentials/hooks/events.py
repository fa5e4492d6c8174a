"""Event definitions for the hook system."""

from enum import Enum


class HookEvent(str, Enum):
    """Extension points the callbacks attach to, named as the host names them"""

    # Request Lifecycle
    INIT = "init"
    WP_HEAD = "wp_head"
    REDIRECT_CANONICAL = "redirect_canonical"

    # Core Hardening
    THE_GENERATOR = "the_generator"
    XMLRPC_ENABLED = "xmlrpc_enabled"
    REST_ENABLED = "rest_enabled"
    REST_JSONP_ENABLED = "rest_jsonp_enabled"

    # Uploads & Media
    UPLOAD_MIMES = "upload_mimes"
    HANDLE_UPLOAD_PREFILTER = "wp_handle_upload_prefilter"
    PREPARE_ATTACHMENT_FOR_JS = "wp_prepare_attachment_for_js"
    IMAGE_SIZE_NAMES_CHOOSE = "image_size_names_choose"

    # Advanced Custom Fields
    ACF_SAVE_JSON = "acf/settings/save_json"
    ACF_LOAD_JSON = "acf/settings/load_json"

    # Gravity Forms
    GFORM_FORM_TAG = "gform_form_tag"
    GFORM_FIELD_CONTENT = "gform_field_content"
