"""Delete employee use case."""

import structlog

from company_manager.application.identity.protocols.user_account_repository import (
    UserAccountRepositoryProtocol,
)
from company_manager.application.organization.protocols.employee_repository import (
    EmployeeRepositoryProtocol,
)
from company_manager.domain.common.value_objects.ids import EmployeeId

logger = structlog.get_logger(__name__)


class DeleteEmployeeUseCase:
    """Use case for deleting employees."""

    def __init__(
        self,
        employee_repository: EmployeeRepositoryProtocol,
        user_account_repository: UserAccountRepositoryProtocol,
    ) -> None:
        self.employee_repository = employee_repository
        self.user_account_repository = user_account_repository

    def delete_employee(self, employee_id: EmployeeId) -> None:
        """
        Delete an employee and their user account (hard delete).

        Deleting an employee that does not exist is a no-op.
        """
        account = self.user_account_repository.find_by_employee_id(employee_id)
        if account is not None:
            self.user_account_repository.delete(account.id)

        if not self.employee_repository.delete(employee_id):
            logger.info("employee_delete_skipped", employee_id=str(employee_id))
            return

        logger.info("employee_deleted", employee_id=str(employee_id))
