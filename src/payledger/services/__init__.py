"""Service layer — driver-facing payroll and roster operations."""
