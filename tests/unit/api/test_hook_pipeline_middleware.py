"""Tests for the ASGI hook pipeline middleware."""

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from wp_essentials.api.middleware import HookPipelineMiddleware
from wp_essentials.hooks import HookEvent, HookManager
from wp_essentials.plugin import register_essentials


async def echo(request: Request) -> PlainTextResponse:
    return PlainTextResponse(f"served {request.url.path}")


@pytest.fixture
def app() -> Starlette:
    return Starlette(routes=[Route("/{path:path}", echo)])


@pytest.fixture
def manager(hook_registry, settings_factory) -> HookManager:
    manager = HookManager(hook_registry)
    register_essentials(hook_registry, settings_factory(), manager=manager)
    return manager


@pytest.fixture
def client(app, manager, settings_factory) -> TestClient:
    return TestClient(
        HookPipelineMiddleware(app, manager=manager, settings=settings_factory())
    )


def test_regular_request_served(client):
    response = client.get("/blog/?p=1")
    assert response.status_code == 200
    assert response.text == "served /blog/"


@pytest.mark.parametrize("url", ["/?author=1", "/?AUTHOR=2", "/blog/?s=x&author=10"])
def test_author_query_terminated(client, url):
    response = client.get(url)
    assert response.status_code == 200
    assert response.content == b""


def test_admin_request_not_guarded(client):
    response = client.get("/wp-admin/users.php?author=1")
    assert response.text == "served /wp-admin/users.php"


def test_admin_prefix_must_match_segment(client):
    response = client.get("/wp-administrator/?author=1")
    assert response.content == b""


def test_terminate_status_configurable(app, manager, settings_factory):
    settings = settings_factory(server={"terminate_status_code": 404})
    client = TestClient(HookPipelineMiddleware(app, manager=manager, settings=settings))

    response = client.get("/?author=1")

    assert response.status_code == 404
    assert response.content == b""


def test_init_actions_see_request_context(app, hook_registry, settings_factory):
    seen = []
    hook_registry.add_action(
        HookEvent.INIT,
        lambda *, context: seen.append(context),
        name="capture",
        with_context=True,
    )
    client = TestClient(
        HookPipelineMiddleware(
            app, manager=HookManager(hook_registry), settings=settings_factory()
        )
    )

    client.get("/shop/?page=2")

    assert len(seen) == 1
    assert seen[0].query_string == "page=2"
    assert seen[0].request_uri == "/shop/?page=2"
    assert seen[0].is_admin is False


def test_build_context(app, manager, settings_factory):
    middleware = HookPipelineMiddleware(app, manager=manager, settings=settings_factory())

    context = middleware.build_context(
        {"type": "http", "path": "/wp-admin", "query_string": b"author=1"}
    )

    assert context.is_admin is True
    assert context.query_string == "author=1"
    assert context.request_uri == "/wp-admin?author=1"


def test_request_served_when_init_has_no_callbacks(app, hook_registry, settings_factory):
    settings = settings_factory(features={"block_user_enumeration": False})
    manager = HookManager(hook_registry)
    register_essentials(hook_registry, settings, manager=manager)
    client = TestClient(HookPipelineMiddleware(app, manager=manager, settings=settings))

    assert manager.has_hooks(HookEvent.INIT) is False
    assert client.get("/?author=1").text == "served /"
