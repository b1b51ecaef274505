"""Mapper for UserAccount ORM ↔ Domain conversion."""

from company_manager.domain.common.value_objects.ids import (
    EmployeeId,
    JobTitleId,
    RoleId,
    UserAccountId,
)
from company_manager.domain.identity.entities.user_account import UserAccount
from company_manager.infrastructure.common.timestamps import as_utc, as_utc_required
from company_manager.models import UserAccount as UserAccountORM


class UserAccountMapper:
    """Mapper for UserAccount ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserAccountORM) -> UserAccount:
        """Convert ORM model to domain entity."""
        return UserAccount.create_with_id(
            id=UserAccountId(orm_model.id),
            user_name=orm_model.user_name,
            password_hash=orm_model.password_hash,
            employee_id=EmployeeId(orm_model.employee_id),
            role_id=RoleId(orm_model.role_id),
            job_title_id=JobTitleId(orm_model.job_title_id),
            security_stamp=orm_model.security_stamp,
            password_changed_at=as_utc_required(orm_model.password_changed_at),
            is_active=orm_model.is_active,
            access_failed_count=orm_model.access_failed_count,
            lockout_end_utc=as_utc(orm_model.lockout_end_utc),
            two_factor_enabled=orm_model.two_factor_enabled,
            two_factor_secret=orm_model.two_factor_secret,
            created_at=as_utc_required(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(
        self, domain_entity: UserAccount, orm_model: UserAccountORM | None = None
    ) -> UserAccountORM:
        """Convert domain entity to ORM model."""
        if orm_model is None:
            # Create new
            orm_model = UserAccountORM(
                id=domain_entity.id.value,
                created_at=domain_entity.created_at,
            )

        orm_model.user_name = domain_entity.user_name
        orm_model.password_hash = domain_entity.password_hash
        orm_model.employee_id = domain_entity.employee_id.value
        orm_model.role_id = domain_entity.role_id.value
        orm_model.job_title_id = domain_entity.job_title_id.value
        orm_model.security_stamp = domain_entity.security_stamp
        orm_model.password_changed_at = domain_entity.password_changed_at
        orm_model.is_active = domain_entity.is_active
        orm_model.access_failed_count = domain_entity.access_failed_count
        orm_model.lockout_end_utc = domain_entity.lockout_end_utc
        orm_model.two_factor_enabled = domain_entity.two_factor_enabled
        orm_model.two_factor_secret = domain_entity.two_factor_secret
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
