"""Test configuration and fixtures for the product catalog."""

from tests.fixtures import *  # noqa: F401,F403
