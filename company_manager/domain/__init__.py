"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Value Objects: Email, DocumentNumber (CPF), PhoneNumber, DateOfBirth
- Access control: HierarchicalRole and the Role entity
- Identity: UserAccount and its lockout state machine
- Organization: Employee, EmployeePhone, Department, JobTitle
"""
