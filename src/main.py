"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.health import router as health_router
from src.api.rig import router as rig_router
from src.config import settings
from src.core.logging import get_logger, setup_logging
from src.modules.module_manager import ModuleManager
from src.modules.rig.module import ViewpointRigModule

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing host modules...")
    manager = ModuleManager()
    rig_module = ViewpointRigModule(manager.event_bus)
    manager.register(rig_module)
    manager.enable(rig_module.name)

    app.state.module_manager = manager
    app.state.rig_module = rig_module
    app.state.tick = 0
    logger.info(f"Viewpoint rig ready ({len(rig_module.rig.viewpoints)} viewpoints).")

    yield

    logger.info("Shutting down...")
    manager.disable(rig_module.name)


app = FastAPI(title="Smart 3DOF Rig", lifespan=lifespan)

app.include_router(health_router)
app.include_router(rig_router)
