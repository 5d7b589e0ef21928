from dataclasses import dataclass
from typing import Optional


@dataclass
class CommandResult:
    """
    Outcome of a single command invocation.

    Results are produced once per invocation and never persisted. Failures
    are always reported through a result rather than raised to the host.
    """

    success: bool
    error_message: Optional[str] = None

    @classmethod
    def ok(cls) -> "CommandResult":
        """Create a successful result"""
        return cls(success=True)

    @classmethod
    def failure(cls, error_message: str) -> "CommandResult":
        """Create a failed result carrying a user-facing message"""
        return cls(success=False, error_message=error_message)

    def is_success(self) -> bool:
        return self.success

    def is_failure(self) -> bool:
        return not self.success
