"""Pytest configuration and shared fixtures for the resumark test suite."""

import logging
import os

import pytest
from hypothesis import Verbosity, settings

from resumark.ast import Bold, BulletList, Doc, Italic, Link, ListItem, OrderedList, Paragraph, Text

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_doc() -> Doc:
    """A summary with a paragraph, a bullet list and an ordered list."""
    return Doc(
        children=[
            Paragraph(
                children=[
                    Text("Built "),
                    Text("search", marks=[Bold()]),
                    Text(" at "),
                    Text("Acme", marks=[Link(href="https://acme.test", target="_blank")]),
                ]
            ),
            BulletList(
                children=[
                    ListItem(children=[Paragraph(children=[Text("Python")])]),
                    ListItem(children=[Paragraph(children=[Text("Rust", marks=[Italic()])])]),
                ]
            ),
            OrderedList(children=[ListItem(children=[Paragraph(children=[Text("first")])])]),
        ]
    )


@pytest.fixture
def reset_package_logger():
    """Undo handlers and levels installed by CLI runs."""
    yield
    package_logger = logging.getLogger("resumark")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
