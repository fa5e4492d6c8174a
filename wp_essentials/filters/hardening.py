"""Core hardening filters."""

from typing import Any


# Name of the host's default wp_head callback that prints the generator tag
GENERATOR_ACTION = "wp_generator"


def hide_generator(generator: str = "") -> str:
    """Blank the generator meta tag to avoid exposing the platform version."""
    return ""


def disable_xmlrpc(enabled: Any = True) -> bool:
    return False


def disable_rest_api(enabled: Any = True) -> bool:
    return False


def disable_rest_jsonp(enabled: Any = True) -> bool:
    return False
