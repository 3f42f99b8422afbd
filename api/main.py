from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import default_config
from app_state import AppState
from startup.manager import StartupManager
from routes.errors import register_error_handlers
from routes.health import router as health_router
from routes.files import router as files_router
from routes.chatbot import router as chatbot_router
from routes.training import router as training_router

# Global state
state = AppState()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan"""
    manager = StartupManager(state, default_config)
    await manager.initialize()
    yield


app = FastAPI(
    title="Hiring Assistant API",
    description="Document collections and retrieval-augmented assistant for hiring evaluation",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if default_config.server.allows_any_origin else default_config.server.cors_allow_origins,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_error_handlers(app)

# Store state in app for route access
app.state.app_state = state

# Include route modules
app.include_router(health_router)
app.include_router(files_router)
app.include_router(chatbot_router)
app.include_router(training_router)

# Routes live in routes/ modules, one per resource:
# - routes/health.py: health and collection discovery
# - routes/files.py: file upload/list/delete (3 endpoints)
# - routes/chatbot.py: assistant conversation
# - routes/training.py: training recommendations (2 endpoints)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_config.server.host, port=default_config.server.port)
