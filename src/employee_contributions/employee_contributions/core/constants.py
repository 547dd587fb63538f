"""Constants and defaults.

Note: Keep user-facing messages here so controllers and services agree on wording.
"""

DEFAULT_POOL_SIZE = 5

EMPLOYEE_NOT_FOUND = "Employee not found"
CONTRIBUTION_NOT_FOUND = "Contribution not found"
EMPLOYEE_REFERENCE_NOT_FOUND = "Employee not found. Please check the employee ID."

EMPLOYEE_UPDATED = "Employee updated successfully"
EMPLOYEE_DELETED = "Employee deleted successfully"
CONTRIBUTION_DELETED = "Contribution deleted successfully"

# Column limits, kept in step with database/schema.sql.
NAME_MAX_LENGTH = 255
DEPARTMENT_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 64
MONTH_MAX_LENGTH = 32
EMPLOYEE_REF_MAX_LENGTH = 64
AMOUNT_PLACES = 2
AMOUNT_MAX_DIGITS = 14
