"""Application startup and shutdown."""

import structlog

from company_manager.config import Settings, configure_logging, get_settings
from company_manager.core import container
from company_manager.database import (
    create_schema,
    dispose_engine,
    initialize_database,
    session_scope,
)
from company_manager.domain.identity.entities.user_account import UserAccount
from company_manager.infrastructure.common.di import inject_use_case

logger = structlog.get_logger(__name__)


def startup(settings: Settings | None = None) -> UserAccount | None:
    """
    Prepare the application for use.

    Configures logging, creates the schema and seeds the SuperUser on an
    empty database.

    Returns:
        The SuperUser account when it was created by this call
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    create_schema()

    build_bootstrap = inject_use_case(container.bootstrap_super_user_use_case)
    with session_scope() as db:
        account = build_bootstrap(db).bootstrap_super_user(
            settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD
        )

    logger.info("application_started", environment=settings.ENVIRONMENT)
    return account


def shutdown() -> None:
    dispose_engine()
    logger.info("application_stopped")
