from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from company_manager.application.identity.services.hierarchical_authorization_service import (
    HierarchicalAuthorizationService,
)
from company_manager.application.identity.services.role_management_service import (
    RoleManagementService,
)
from company_manager.application.identity.use_cases.authentication.authenticate_use_case import (
    AuthenticateUseCase,
)
from company_manager.application.identity.use_cases.authentication.logout_use_case import (
    LogoutUseCase,
)
from company_manager.application.identity.use_cases.authentication.refresh_token_use_case import (
    RefreshTokenUseCase,
)
from company_manager.application.identity.use_cases.bootstrap_super_user_use_case import (
    BootstrapSuperUserUseCase,
)
from company_manager.application.identity.use_cases.change_password_use_case import (
    ChangePasswordUseCase,
)
from company_manager.application.organization.services.employee_validation_service import (
    EmployeeValidationService,
)
from company_manager.application.organization.use_cases.departments import (
    CreateDepartmentUseCase,
    DeleteDepartmentUseCase,
    GetDepartmentByIdUseCase,
    ListDepartmentsUseCase,
    UpdateDepartmentUseCase,
)
from company_manager.application.organization.use_cases.employees import (
    CreateEmployeeUseCase,
    DeleteEmployeeUseCase,
    GetEmployeeByIdUseCase,
    ListEmployeesUseCase,
    UpdateEmployeeUseCase,
)
from company_manager.application.organization.use_cases.job_titles import (
    CreateJobTitleUseCase,
    DeleteJobTitleUseCase,
    GetJobTitleByIdUseCase,
    ListJobTitlesUseCase,
    UpdateJobTitleUseCase,
)
from company_manager.config import get_settings
from company_manager.infrastructure.identity.repositories import (
    RoleRepository,
    UserAccountRepository,
)
from company_manager.infrastructure.identity.services.password_service_adapter import (
    PasswordServiceAdapter,
)
from company_manager.infrastructure.identity.services.token_service_adapter import (
    TokenServiceAdapter,
)
from company_manager.infrastructure.organization.repositories import (
    DepartmentRepository,
    EmployeeRepository,
    JobTitleRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Organization repositories
    employee_repository = providers.Factory(EmployeeRepository, db=db)
    department_repository = providers.Factory(DepartmentRepository, db=db)
    job_title_repository = providers.Factory(JobTitleRepository, db=db)

    # Identity repositories and services
    user_account_repository = providers.Factory(UserAccountRepository, db=db)
    role_repository = providers.Factory(RoleRepository, db=db)
    password_service = providers.Singleton(PasswordServiceAdapter)
    token_service = providers.Singleton(TokenServiceAdapter)

    # Application services
    authorization_service = providers.Factory(
        HierarchicalAuthorizationService,
        user_account_repository=user_account_repository,
        role_repository=role_repository,
    )
    role_management_service = providers.Factory(
        RoleManagementService,
        role_repository=role_repository,
    )
    employee_validation_service = providers.Factory(
        EmployeeValidationService,
        employee_repository=employee_repository,
        department_repository=department_repository,
        job_title_repository=job_title_repository,
    )

    # Identity module, application use cases
    authenticate_use_case = providers.Factory(
        AuthenticateUseCase,
        user_account_repository=user_account_repository,
        role_repository=role_repository,
        password_service=password_service,
        token_service=token_service,
        max_failed_attempts=settings.provided.MAX_FAILED_LOGIN_ATTEMPTS,
        lockout_minutes=settings.provided.LOCKOUT_MINUTES,
    )
    refresh_token_use_case = providers.Factory(
        RefreshTokenUseCase,
        user_account_repository=user_account_repository,
        role_repository=role_repository,
        token_service=token_service,
    )
    logout_use_case = providers.Factory(
        LogoutUseCase,
        user_account_repository=user_account_repository,
        token_service=token_service,
    )
    change_password_use_case = providers.Factory(
        ChangePasswordUseCase,
        user_account_repository=user_account_repository,
        password_service=password_service,
    )
    bootstrap_super_user_use_case = providers.Factory(
        BootstrapSuperUserUseCase,
        user_account_repository=user_account_repository,
        employee_repository=employee_repository,
        department_repository=department_repository,
        job_title_repository=job_title_repository,
        role_management_service=role_management_service,
        password_service=password_service,
    )

    # Organization module, employees
    create_employee_use_case = providers.Factory(
        CreateEmployeeUseCase,
        employee_repository=employee_repository,
        user_account_repository=user_account_repository,
        validation_service=employee_validation_service,
        authorization_service=authorization_service,
        role_management_service=role_management_service,
        password_service=password_service,
    )
    update_employee_use_case = providers.Factory(
        UpdateEmployeeUseCase,
        employee_repository=employee_repository,
        user_account_repository=user_account_repository,
        validation_service=employee_validation_service,
        role_management_service=role_management_service,
    )
    delete_employee_use_case = providers.Factory(
        DeleteEmployeeUseCase,
        employee_repository=employee_repository,
        user_account_repository=user_account_repository,
    )
    get_employee_use_case = providers.Factory(
        GetEmployeeByIdUseCase, employee_repository=employee_repository
    )
    list_employees_use_case = providers.Factory(
        ListEmployeesUseCase, employee_repository=employee_repository
    )

    # Organization module, departments
    create_department_use_case = providers.Factory(
        CreateDepartmentUseCase, department_repository=department_repository
    )
    update_department_use_case = providers.Factory(
        UpdateDepartmentUseCase, department_repository=department_repository
    )
    delete_department_use_case = providers.Factory(
        DeleteDepartmentUseCase, department_repository=department_repository
    )
    get_department_use_case = providers.Factory(
        GetDepartmentByIdUseCase, department_repository=department_repository
    )
    list_departments_use_case = providers.Factory(
        ListDepartmentsUseCase, department_repository=department_repository
    )

    # Organization module, job titles
    create_job_title_use_case = providers.Factory(
        CreateJobTitleUseCase, job_title_repository=job_title_repository
    )
    update_job_title_use_case = providers.Factory(
        UpdateJobTitleUseCase, job_title_repository=job_title_repository
    )
    delete_job_title_use_case = providers.Factory(
        DeleteJobTitleUseCase, job_title_repository=job_title_repository
    )
    get_job_title_use_case = providers.Factory(
        GetJobTitleByIdUseCase, job_title_repository=job_title_repository
    )
    list_job_titles_use_case = providers.Factory(
        ListJobTitlesUseCase, job_title_repository=job_title_repository
    )


# Initialize container
container = Container()
