"""
Shared fixtures and test components
"""

from unittest.mock import MagicMock

import pytest

from content_registrar import (
    ComponentRegistrar,
    ComponentRenderer,
    DataDefinition,
    RenderFunctionServices,
    component_factory,
)

factory = component_factory()


def render_title(props, services):
    return f"<h1>{props['title']}</h1>"


def render_teaser(props, data_props, services):
    if not data_props.loaded:
        return f"<p>{props.get('heading', '')}: {data_props.state.status.value}</p>"
    return f"<p>{props.get('heading', '')}: {', '.join(data_props.result)}</p>"


def load_headlines(config, load_data_services, context):
    return ["headline"] * config.get("limit", 1)


test_component_with_props_registration = factory.create_registerable_component(
    "testWithTitleProp", render_title
)

headlines_definition = DataDefinition(load_data=load_headlines)

test_component_with_data_registration = factory.create_registerable_component_with_data(
    "testWithData", headlines_definition, render_teaser
)


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def registrar(logger):
    return ComponentRegistrar(logger=logger, production=False).register(
        test_component_with_props_registration
    )


@pytest.fixture
def services():
    return RenderFunctionServices(route_builder=object(), load_data_services={})


@pytest.fixture
def renderer(registrar):
    return ComponentRenderer(registrar)
