"""
Health controller.
Coordinates health service to return health status.
"""

from manager_logbook.controllers.base_controller import BaseController
from manager_logbook.schemas.health import HealthResponse
from manager_logbook.services.health_service import HealthService


class HealthController(BaseController):
    """Controller for health check operations."""
    
    def __init__(self, health_service: HealthService = None):
        self.health_service = health_service or HealthService()
    
    async def get_health(self) -> HealthResponse:
        """Get system health status."""
        return await self.health_service.get_health()
