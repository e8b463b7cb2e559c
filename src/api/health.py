"""Health check endpoint."""

from fastapi import APIRouter, Request

from src.modules.module_manager import ModuleManager

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str | int]:
    """Return application status and the number of enabled host modules."""
    manager: ModuleManager = request.app.state.module_manager
    return {"status": "ok", "modules": len(manager.get_enabled_modules())}
