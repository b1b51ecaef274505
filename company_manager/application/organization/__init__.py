"""Organization application layer: employees, departments and job titles."""
