import pytest

from configmanager import ConfigManager, ManagerSettings, PropertyStore, StaticConfiguration


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset process-wide instances before and after each test."""
    PropertyStore.reset_instance()
    ConfigManager.reset_instance()
    yield  # test runs here
    ConfigManager.reset_instance()
    PropertyStore.reset_instance()


@pytest.fixture
def property_store():
    """Provide an isolated property store."""
    return PropertyStore()


@pytest.fixture
def environ():
    """Provide an isolated environment mapping."""
    return {}


@pytest.fixture
def manager(property_store, environ):
    """Provide a manager over an empty static source with isolated overlays."""
    configuration = StaticConfiguration({}, properties=property_store, environ=environ)
    manager = ConfigManager(configuration, settings=ManagerSettings(shutdown_timeout=1.0))
    yield manager
    manager.shutdown()


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Configure logging for tests."""
    from loguru import logger
    import sys

    # Remove default handlers
    logger.remove()

    # Add test-specific handler with appropriate level
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )

    yield

    # Cleanup
    logger.remove()
