"""
Tests for content area rendering
"""

import pytest

from content_registrar import (
    ComponentDescriptor,
    ComponentRegistrar,
    ComponentRenderer,
    RenderFunctionServices,
)
from content_registrar.middleware import ErrorBoundaryMiddleware
from tests.conftest import factory, test_component_with_props_registration


def test_can_hook_component_middleware(registrar, renderer, services):
    recorded = {}

    def middleware(component_props, middleware_props, render_services, next):
        recorded["called"] = True
        recorded["props"] = middleware_props
        return next()

    registrar.register_middleware(middleware)

    results = renderer.render_content_area(
        [{"type": "testWithTitleProp", "props": {"title": "test"}, "skipRender": True}],
        services,
    )

    assert len(results) == 1
    assert "test" in results[0]
    assert recorded["called"] is True
    assert recorded["props"] == {"skipRender": True}


def test_stored_next_still_renders(registrar, renderer, services):
    recorded = {}

    def middleware(component_props, middleware_props, render_services, next):
        recorded["next"] = next
        return None

    registrar.register_middleware(middleware)

    results = renderer.render_content_area(
        [{"type": "testWithTitleProp", "props": {"title": "test"}, "skipRender": True}],
        services,
    )

    assert results == [None]
    assert recorded["next"]() == "<h1>test</h1>"


def test_can_hook_multiple_component_middleware(registrar, renderer, services):
    recorded = {"first": False, "second": False}

    def first(props, middleware_props, render_services, next):
        recorded["first"] = True
        if recorded["second"]:
            raise AssertionError("middlewares called out of order")
        return next(props, middleware_props, render_services)

    def second(props, middleware_props, render_services, next):
        recorded["second"] = True
        recorded["props"] = middleware_props
        recorded["next"] = next
        return None

    registrar.register_middleware(first).register_middleware(second)

    renderer.render_content_area(
        [{"type": "testWithTitleProp", "props": {"title": "test"}, "skipRender2": True}],
        services,
    )

    assert recorded["first"] is True
    assert recorded["second"] is True
    assert recorded["props"] == {"skipRender2": True}
    assert "test" in recorded["next"]()


def test_middleware_rewrite_reaches_renderer(logger, services):
    seen = []

    def render(props, render_services):
        seen.append(props)
        return f"flag={props['flag']}"

    registrar = (
        ComponentRegistrar(logger=logger, production=False)
        .register(factory.create_registerable_component("flagged", render))
        .register_middleware(lambda cp, mp, s, next: next(cp, {**mp, "flag": True}, s))
    )

    results = ComponentRenderer(registrar).render_content_area([{"type": "flagged"}], services)

    assert results == ["flag=True"]
    assert seen == [{"flag": True}]


@pytest.mark.parametrize("production, warnings", [(False, 1), (True, 0)])
def test_unregistered_type_renders_empty(logger, services, production, warnings):
    called = []
    registrar = (
        ComponentRegistrar(logger=logger, production=production)
        .register(test_component_with_props_registration)
        .register_middleware(lambda cp, mp, s, next: called.append(True) or next())
    )

    results = ComponentRenderer(registrar).render_content_area(
        [{"type": "notRegistered", "props": {}}], services
    )

    assert results == [None]
    assert called == []
    assert logger.warning.call_count == warnings
    if warnings:
        assert "notRegistered" in logger.warning.call_args.args[0]


def test_results_keep_input_order(renderer, logger, services):
    results = renderer.render_content_area(
        [
            {"type": "testWithTitleProp", "props": {"title": "one"}},
            {"type": "missing"},
            ComponentDescriptor(type="testWithTitleProp", props={"title": "three"}),
        ],
        services,
    )

    assert results == ["<h1>one</h1>", None, "<h1>three</h1>"]
    logger.warning.assert_called_once()


def test_empty_content_area(renderer):
    assert renderer.render_content_area([]) == []


def test_render_component(renderer):
    assert renderer.render_component({"type": "testWithTitleProp", "props": {"title": "x"}}) == "<h1>x</h1>"


def test_services_are_threaded_to_render(logger):
    route_builder = object()
    received = []
    registrar = ComponentRegistrar(logger=logger, production=False).register_component(
        "linked", lambda props, services: received.append(services.route_builder) or "link"
    )
    services = RenderFunctionServices(route_builder=route_builder, load_data_services={"api": 1})

    ComponentRenderer(registrar).render_content_area([{"type": "linked"}], services)

    assert received == [route_builder]


def test_render_exceptions_propagate(logger, services):
    def explode(props, render_services):
        raise RuntimeError("boom")

    registrar = (
        ComponentRegistrar(logger=logger, production=False)
        .register(test_component_with_props_registration)
        .register_component("exploding", explode)
    )

    with pytest.raises(RuntimeError, match="boom"):
        ComponentRenderer(registrar).render_content_area(
            [{"type": "testWithTitleProp", "props": {"title": "ok"}}, {"type": "exploding"}],
            services,
        )


def test_error_boundary_isolates_failures(logger, services):
    def explode(props, render_services):
        raise RuntimeError("boom")

    registrar = (
        ComponentRegistrar(logger=logger, production=False)
        .register(test_component_with_props_registration)
        .register_component("exploding", explode)
        .register_middleware(ErrorBoundaryMiddleware(log=logger))
    )

    results = ComponentRenderer(registrar).render_content_area(
        [
            {"type": "exploding"},
            {"type": "testWithTitleProp", "props": {"title": "ok"}},
        ],
        services,
    )

    assert results == [None, "<h1>ok</h1>"]
    logger.error.assert_called_once()
