"""
Pytest configuration and shared fixtures

Common fixtures used across multiple test files are defined here.
Per Kent Beck TDD: Good fixtures reduce test setup duplication.
"""
import pytest

from tests import FakeUpstream, make_config


# =============================================================================
# Common Fixtures
# =============================================================================

@pytest.fixture
def upstream():
    """Fresh in-memory upstream per test"""
    return FakeUpstream()


@pytest.fixture
def app_config():
    """Config with no pinned vector stores"""
    return make_config()


@pytest.fixture
def registry(app_config):
    """Fresh collection registry per test"""
    from operations.collection_registry import CollectionRegistry
    return CollectionRegistry.from_config(app_config)


@pytest.fixture
def app_state(app_config, upstream, registry):
    """AppState wired around the fake upstream"""
    from app_state import AppState
    return AppState().wire(app_config, upstream, registry)


@pytest.fixture
def client(app_state):
    """Create test client with all routers and the error envelope"""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient
    from routes.errors import register_error_handlers
    from routes.health import router as health_router
    from routes.files import router as files_router
    from routes.chatbot import router as chatbot_router
    from routes.training import router as training_router

    app = FastAPI()
    register_error_handlers(app)
    for router in (health_router, files_router, chatbot_router, training_router):
        app.include_router(router)
    app.state.app_state = app_state

    return TestClient(app)
