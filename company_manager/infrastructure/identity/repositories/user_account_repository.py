"""Repository for UserAccount domain entities."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from company_manager.domain.common.value_objects.ids import EmployeeId, UserAccountId
from company_manager.domain.identity.entities.user_account import UserAccount
from company_manager.domain.identity.exceptions import UserNameAlreadyExistsError
from company_manager.infrastructure.identity.mappers.user_account_mapper import UserAccountMapper
from company_manager.models import UserAccount as UserAccountORM

logger = logging.getLogger(__name__)


class UserAccountRepository:
    """Repository for UserAccount domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserAccountMapper()

    def find_by_id(self, account_id: UserAccountId) -> UserAccount | None:
        """
        Find an account by ID.

        Args:
            account_id: The account ID

        Returns:
            UserAccount entity if found, None otherwise
        """
        orm_model = self.db.get(UserAccountORM, account_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_name(self, user_name: str) -> UserAccount | None:
        """
        Find an account by user name.

        The lookup is case-insensitive because user names are stored lowercased.
        """
        stmt = select(UserAccountORM).where(UserAccountORM.user_name == user_name.strip().lower())
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_employee_id(self, employee_id: EmployeeId) -> UserAccount | None:
        stmt = select(UserAccountORM).where(UserAccountORM.employee_id == employee_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def count(self) -> int:
        stmt = select(func.count()).select_from(UserAccountORM)
        return self.db.execute(stmt).scalar_one()

    def save(self, account: UserAccount) -> UserAccount:
        """
        Insert or update an account.

        Raises:
            UserNameAlreadyExistsError: If another account has the user name
        """
        orm_model = self.db.get(UserAccountORM, account.id.value)
        is_new = orm_model is None
        orm_model = self.mapper.to_orm(account, orm_model)
        if is_new:
            self.db.add(orm_model)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "user_name" in str(e.orig):
                raise UserNameAlreadyExistsError(account.user_name) from e
            raise

        self.db.refresh(orm_model)
        logger.info(f"{'Created' if is_new else 'Updated'} user account {account.id}")
        return self.mapper.to_domain(orm_model)

    def delete(self, account_id: UserAccountId) -> bool:
        """Delete an account. Returns False when it did not exist."""
        orm_model = self.db.get(UserAccountORM, account_id.value)
        if orm_model is None:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted user account {account_id}")
        return True
