"""
Dependency injection container wiring tests.
"""

from manager_logbook.core.config import Settings, settings
from manager_logbook.deps.di_container import Container
from manager_logbook.services.business_validator import BusinessValidator
from manager_logbook.services.review_editor import ReviewEditor


def test_collaborators_are_singletons_built_from_settings():
    container = Container()

    validator = container.business_validator()

    assert isinstance(validator, BusinessValidator)
    assert validator is container.business_validator()
    assert validator.config is settings
    assert isinstance(container.review_editor(), ReviewEditor)


def test_overriding_settings_reaches_both_collaborators():
    container = Container()
    custom = Settings(NAME_MAX_LENGTH=5, REVIEW_BLOCKED_WORDS=["awful"])

    with container.app_settings.override(custom):
        validator = container.business_validator()
        editor = container.review_editor()

    assert validator.config is custom
    assert editor.auto_edit_review("Awful food") == "***** food"
