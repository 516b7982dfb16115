"""Unit tests for route registration and the per-route guard."""

import pytest
from httpx import ASGITransport, AsyncClient

from streamify.api.registrar import RouteRegistrar
from streamify.api.routes_auth import registrar as auth_registrar
from streamify.api.routes_users import registrar as users_registrar
from streamify.core.exceptions import DuplicateRouteError, UnauthorizedError


def test_duplicate_route_rejected():
    registrar = RouteRegistrar(prefix="/things")

    @registrar.get("/")
    async def first():
        return {}

    with pytest.raises(DuplicateRouteError) as exc_info:
        @registrar.get("/")
        async def second():
            return {}

    assert exc_info.value.method == "GET"
    assert exc_info.value.path == "/things/"


def test_same_path_different_verb_allowed():
    registrar = RouteRegistrar(prefix="/things")

    @registrar.get("/{id}")
    async def read(id: str):
        return {}

    @registrar.put("/{id}")
    async def write(id: str):
        return {}

    assert [(m, p) for m, p, _ in registrar.routes] == [
        ("GET", "/things/{id}"),
        ("PUT", "/things/{id}"),
    ]


def test_auth_routes_protection():
    declared = {(m, p): protected for m, p, protected in auth_registrar.routes}
    assert declared == {
        ("POST", "/auth/signup"): False,
        ("POST", "/auth/login"): False,
        ("POST", "/auth/logout"): False,
        ("POST", "/auth/onboarding"): True,
        ("GET", "/auth/me"): True,
    }


def test_user_routes_all_protected():
    assert users_registrar.routes
    assert all(protected for _, _, protected in users_registrar.routes)


async def test_guard_short_circuits_handler(app):
    calls = []

    async def reject_all():
        raise UnauthorizedError("Unauthorized - No token provided")

    registrar = RouteRegistrar(prefix="/api/guarded", guard=reject_all)

    @registrar.post("/write", protected=True)
    async def write():
        calls.append("write")
        return {"ok": True}

    @registrar.post("/open")
    async def open_write():
        calls.append("open")
        return {"ok": True}

    app.include_router(registrar.router)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        rejected = await client.post("/api/guarded/write")
        accepted = await client.post("/api/guarded/open")

    assert rejected.status_code == 401
    assert rejected.json()["success"] is False
    assert accepted.status_code == 200
    assert calls == ["open"]


def test_protected_routes_document_unauthorized():
    registrar = RouteRegistrar(prefix="/things")

    @registrar.get("/mine", protected=True)
    async def mine():
        return {}

    @registrar.get("/public")
    async def public():
        return {}

    routes = {route.path: route for route in registrar.router.routes}
    assert 401 in routes["/things/mine"].responses
    assert 401 not in routes["/things/public"].responses
