"""Organization infrastructure: employee, department and job title persistence."""
