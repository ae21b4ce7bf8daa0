"""Pytest configuration and shared fixtures for the mdspans test suite."""

import logging
import os

import pytest
from hypothesis import Verbosity, settings
from utils import CLASS_STYLES, HEADER_STYLES, bullet, inline_style

from mdspans.parser import Parser
from mdspans.rules import create_markdown_rules, create_simple_markdown_rules
from mdspans.styles import create_header_style_resolver

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture(autouse=True)
def restore_package_logging():
    """Undo the handler changes made by configure_logging."""
    package_logger = logging.getLogger("mdspans")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def header_resolver():
    """Header resolver mapping level N to ``"hN"`` and other levels to ``"fallback"``."""
    return create_header_style_resolver(HEADER_STYLES, "fallback")


@pytest.fixture
def class_resolver():
    """Class resolver knowing ``red`` and ``blue``."""
    return CLASS_STYLES.get


@pytest.fixture
def markdown_rules(header_resolver):
    """Block rules without classed headers, followed by the inline rules."""
    return [
        *create_markdown_rules(header_resolver, bullet),
        *create_simple_markdown_rules(style_provider=inline_style),
    ]


@pytest.fixture
def classed_rules(header_resolver, class_resolver):
    """Block rules with classed headers, followed by the inline rules."""
    return [
        *create_markdown_rules(header_resolver, bullet, class_resolver, inline_style),
        *create_simple_markdown_rules(style_provider=inline_style),
    ]


@pytest.fixture
def markdown_parser(markdown_rules):
    """Parser loaded with the plain block rules."""
    return Parser(markdown_rules)


@pytest.fixture
def classed_parser(classed_rules):
    """Parser loaded with the classed block rules."""
    return Parser(classed_rules)


@pytest.fixture
def inline_parser():
    """Parser with only the inline rules."""
    return Parser(create_simple_markdown_rules(style_provider=inline_style))
