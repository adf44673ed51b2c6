"""
Dependency injection container using dependency-injector.
Wires validation, review editing, health and the per-request controllers.
"""

from dependency_injector import containers, providers

from manager_logbook.core.config import settings
from manager_logbook.services.business_validator import BusinessValidator
from manager_logbook.services.review_editor import ReviewEditor
from manager_logbook.services.health_service import HealthService
from manager_logbook.controllers.health_controller import HealthController
from manager_logbook.controllers.business_unit_controller import BusinessUnitController
from manager_logbook.controllers.review_controller import ReviewController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""
    
    # Application settings; override to swap limits or blocked words
    app_settings = providers.Object(settings)
    
    # Stateless collaborators
    business_validator = providers.Singleton(
        BusinessValidator,
        config=app_settings,
    )
    
    review_editor = providers.Singleton(
        ReviewEditor,
        blocked_words=app_settings.provided.REVIEW_BLOCKED_WORDS,
    )
    
    # Services
    health_service = providers.Singleton(
        HealthService,
    )
    
    # Controllers (session is passed per request)
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )
    
    business_unit_controller = providers.Factory(
        BusinessUnitController,
        business_validator=business_validator,
    )
    
    review_controller = providers.Factory(
        ReviewController,
        business_validator=business_validator,
        review_editor=review_editor,
    )


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = Container()
    return _container
