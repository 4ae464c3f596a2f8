"""Shared fixtures for uicomposer tests."""

import pytest

from uicomposer import ComponentType, Composer, options, text
from uicomposer.toolkit import Button, Fragment, Text


def button_type() -> ComponentType:
    """Button with a variant attribute and three slots."""
    return (
        ComponentType(Button)
        .with_attribute("variant", options("solid", "outline", "ghost", "link"))
        .with_slot("leftIcon")
        .with_slot()
        .with_slot("rightIcon")
    )


@pytest.fixture
def composer() -> Composer:
    return (
        Composer()
        .register_type("UserInterface", ComponentType(Fragment).with_slot("children"))
        .register_type("Text", ComponentType(Text).with_attribute("text", text()))
        .register_type("Button", button_type())
    )
