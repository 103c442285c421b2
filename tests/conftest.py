"""Shared fixtures for dependy tests."""

import pytest

from dependy import DependencyResolver, SimpleDependency


@pytest.fixture
def resolver() -> DependencyResolver[str]:
    """A resolver with a small suite: build requires fetch, test suggests lint."""
    resolver: DependencyResolver[str] = DependencyResolver()
    resolver.add_dependency(SimpleDependency("fetch", provides=("sources",)))
    resolver.add_dependency(SimpleDependency("build", requirements=("sources",)))
    resolver.add_dependency(SimpleDependency("lint"))
    resolver.add_dependency(
        SimpleDependency("test", requirements=("build",), suggestions=("lint",))
    )
    return resolver
