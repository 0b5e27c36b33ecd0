"""ServiceResult and ServiceError: what every service operation returns.

Failures are values, not exceptions. The command layer turns a result
into output and a process exit code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    Attributes:
        code: Stable machine-readable error code (``BINARY_NOT_FOUND``).
        message: One-line human description.
        hint: Optional remediation shown below the message.
        detail: Extra structured context.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    hint: str | None = None
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a service operation.

    ``exit_code`` is what the CLI exits with; it defaults to the generic
    success or failure code matching ``ok``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    exit_code: int = EXIT_SUCCESS

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data, exit_code=EXIT_SUCCESS)

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        hint: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            data=data or {},
            error=ServiceError(code=code, message=message, hint=hint),
            exit_code=EXIT_FAILURE,
        )
