"""Organization domain exceptions."""

from wastekpi.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class BranchNotFoundError(EntityNotFoundError):
    """Raised when a branch identifier does not resolve."""

    def __init__(self, branch_id: str) -> None:
        super().__init__(
            message=f"Branch '{branch_id}' not found",
            code=ErrorCode.BRANCH_NOT_FOUND,
            details={"branch_id": branch_id},
        )


class SiteNotFoundError(EntityNotFoundError):
    """Raised when a site identifier or code does not resolve."""

    def __init__(
        self,
        site_id: str | None = None,
        site_code: str | None = None,
    ) -> None:
        identifier = site_id or site_code or "unknown"
        super().__init__(
            message=f"Site '{identifier}' not found",
            code=ErrorCode.SITE_NOT_FOUND,
            details={"site_id": site_id, "site_code": site_code},
        )


class MissingTargetError(ValidationError):
    """Raised when a site or branch level request has no target identifier."""

    def __init__(self, level: str) -> None:
        super().__init__(
            message=f"A target id is required for level '{level}'",
            code=ErrorCode.MISSING_TARGET,
            details={"level": level},
        )
