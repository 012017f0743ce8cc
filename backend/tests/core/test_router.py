"""Router: exact-match path resolution with not_found fallback."""

import pytest

from status_demo.core import handlers
from status_demo.core.handlers import DemoRequest
from status_demo.core.router import ROUTES, dispatch, resolve


def test_routes_cover_every_demo_path():
    assert set(ROUTES) == {
        "/success", "/badRequest", "/unauthorized", "/forbidden",
        "/internal", "/notImplemented", "/notFound",
    }


def test_resolve_exact_match():
    assert resolve("/success") is handlers.success
    assert resolve("/badRequest") is handlers.bad_request
    assert resolve("/internal") is handlers.internal


@pytest.mark.parametrize("path", [
    "/success/", "/Success", "/success/extra", "/succ", "", "/",
])
def test_resolve_without_exact_match_falls_back_to_not_found(path):
    assert resolve(path) is handlers.not_found


def test_route_table_is_read_only():
    with pytest.raises(TypeError):
        ROUTES["/teapot"] = handlers.success


def test_dispatch_invokes_resolved_handler():
    res = dispatch(DemoRequest(path="/forbidden", accept="text/xml"))
    assert res.status_code == 403
    assert res.body == (
        "<response><message>You do not have access to this content.</message>"
        "<id>forbidden</id></response>"
    )


def test_dispatch_unknown_path_is_404():
    assert dispatch(DemoRequest(path="/nope")).status_code == 404
