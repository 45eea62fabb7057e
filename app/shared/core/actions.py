# 📄 File: app/shared/core/actions.py
# 🧭 Purpose (Layman Explanation):
# Every form the user submits gets back the same simple answer: either a success
# message or an error message, never both.
# 🧪 Purpose (Technical Summary):
# Uniform action-result envelope for all mutating endpoints, plus the helper that
# turns a CareAppException into that envelope.
# 🔗 Dependencies:
# pydantic, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Module routers (success path), app.main exception handlers (error path)

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator

from .exceptions import CareAppException


class ActionResult(BaseModel):
    """Exactly one of ``success`` or ``error`` is set."""

    success: Optional[str] = Field(default=None, description="Success message")
    error: Optional[str] = Field(default=None, description="Error message")
    data: Optional[Any] = Field(default=None, description="Affected record, when useful")

    @model_validator(mode="after")
    def check_exactly_one_outcome(self) -> "ActionResult":
        if (self.success is None) == (self.error is None):
            raise ValueError("An action result carries exactly one of success or error")
        return self

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "ActionResult":
        return cls(success=message, data=data)

    @classmethod
    def failed(cls, message: str) -> "ActionResult":
        return cls(error=message)

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def exception_to_action_result(exc: CareAppException) -> Dict[str, Any]:
    return ActionResult.failed(exc.message).to_response()
