from enum import Enum

class ErrorCode(str, Enum):
    tool_not_found = "TOOL_NOT_FOUND"
    validation_error = "VALIDATION_ERROR"
    domain_error = "DOMAIN_ERROR"
    upstream_error = "UPSTREAM_ERROR"
    internal_error = "INTERNAL_ERROR"
