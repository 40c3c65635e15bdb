"""Pytest configuration and shared fixtures for the cardkit test suite.

This module registers the test markers, configures Hypothesis profiles and
provides the option and document fixtures shared across the suite.
"""

import pytest

from cardkit.options import ImageOptimization, RenderOptions

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


SITE_URL = "https://example.com"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture
def web_options() -> RenderOptions:
    """Provide web render options with responsive images enabled for local images.

    Returns
    -------
    RenderOptions
        Web target options for ``https://example.com`` whose local images can be transformed.

    """
    return RenderOptions(
        target="web",
        site_url=SITE_URL,
        image_optimization=ImageOptimization(),
        can_transform_image=lambda src: True,
    )


@pytest.fixture
def email_options() -> RenderOptions:
    """Provide email render options with a post URL.

    Returns
    -------
    RenderOptions
        Email target options for ``https://example.com``.

    """
    return RenderOptions(
        target="email",
        site_url=SITE_URL,
        post_url=f"{SITE_URL}/hello-world/",
        image_optimization=ImageOptimization(),
        can_transform_image=lambda src: True,
    )
