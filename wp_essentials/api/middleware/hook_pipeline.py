"""Hook pipeline middleware firing the init action for every HTTP request."""

from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from wp_essentials.config import Settings, get_settings
from wp_essentials.context import RequestContext
from wp_essentials.core.logging import get_logger
from wp_essentials.exceptions import RequestTerminated
from wp_essentials.hooks import HookEvent, HookManager


logger = get_logger(__name__)


class HookPipelineMiddleware:
    """Middleware running the ``init`` action before the wrapped application.

    Callbacks on ``init`` see a RequestContext built from the ASGI scope. When
    one of them raises RequestTerminated the wrapped application is never
    called and the client gets an empty body.
    """

    def __init__(
        self,
        app: ASGIApp,
        manager: HookManager,
        settings: Settings | None = None,
    ):
        """Initialize the hook pipeline middleware.

        Args:
            app: The ASGI application
            manager: Manager dispatching the registered callbacks
            settings: Configuration; defaults to ``get_settings()``
        """
        self.app = app
        self.manager = manager
        self.settings = settings or get_settings()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI application entrypoint."""
        if scope["type"] != "http" or not self.manager.has_hooks(HookEvent.INIT):
            await self.app(scope, receive, send)
            return

        context = self.build_context(scope)
        try:
            self.manager.do_action(HookEvent.INIT, context=context)
        except RequestTerminated as e:
            logger.info(
                "request_terminated",
                reason=e.reason,
                path=context.path,
            )
            response = Response(
                content=b"", status_code=self.settings.server.terminate_status_code
            )
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)

    def build_context(self, scope: Scope) -> RequestContext:
        """Create the RequestContext for an HTTP scope."""
        path = scope.get("path", "/")
        query_string = scope.get("query_string", b"").decode("latin-1")
        request_uri = f"{path}?{query_string}" if query_string else path

        prefix = self.settings.server.admin_path_prefix
        is_admin = path == prefix or path.startswith(prefix + "/")

        return RequestContext(
            query_string=query_string,
            request_uri=request_uri,
            is_admin=is_admin,
        )
