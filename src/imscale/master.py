"""Master module - dynamic route aggregator for FastAPI."""

from importlib.metadata import entry_points
from typing import Callable, cast

from fastapi import APIRouter

from .common.config import ServiceConfig
from .common.image_storage import ImageStorage

# Type alias for route factory functions loaded from entry points
RouteFactory = Callable[[ImageStorage, ServiceConfig], APIRouter]

ROUTES_GROUP = "imscale.routes"


def create_master_router(storage: ImageStorage, config: ServiceConfig) -> APIRouter:
    """Dynamically aggregate all plugin routes from entry points.

    Discovers routes from [project.entry-points."imscale.routes"]
    in pyproject.toml and creates a combined router.

    Args:
        storage: ImageStorage over the configured image directory
        config: Service configuration

    Returns:
        Combined APIRouter with all plugin routes

    Raises:
        RuntimeError: If a plugin fails to load (missing dependency, etc.)
    """
    master = APIRouter()

    for ep in entry_points(group=ROUTES_GROUP):
        try:
            create_router = cast(RouteFactory, ep.load())
            master.include_router(create_router(storage, config))
        except Exception as e:
            # Plugin dependency missing = exception (fail fast)
            raise RuntimeError(f"Failed to load plugin '{ep.name}': {e}") from e

    return master


def get_available_plugins() -> list[str]:
    """Get list of available plugins.

    Returns:
        List of plugin names registered as entry points
    """
    return [ep.name for ep in entry_points(group=ROUTES_GROUP)]
