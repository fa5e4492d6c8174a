"""ASGI middleware adapting the hook pipeline to HTTP applications."""

from .hook_pipeline import HookPipelineMiddleware


__all__ = ["HookPipelineMiddleware"]
