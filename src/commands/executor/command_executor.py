import asyncio
import time
from typing import Any, Dict
import logging
from src.commands.interfaces.command_context import ExecuteCommandContext
from src.commands.interfaces.command_result import CommandResult
from src.config.constants import DEFAULT_COMMAND_TIMEOUT_SECONDS
from src.core.resources.service_resource import ServiceResource
from src.models.types import CommandState


logger = logging.getLogger(__name__)


class CommandExecutor:
    """
    Runs resource commands the way the dashboard does when a user clicks one.

    Each call is a single best-effort attempt: disabled commands are refused,
    the execute callback runs under a timeout, and anything escaping the
    command is turned into a failed result. There are no retries.
    """

    def __init__(
        self,
        default_timeout_seconds: float = DEFAULT_COMMAND_TIMEOUT_SECONDS,
    ):
        """
        Initialize command executor with configuration.

        Args:
            default_timeout_seconds: Timeout applied to each command execution
        """
        logger.info("Initializing CommandExecutor")

        self._default_timeout_seconds = default_timeout_seconds

        # Track execution metrics
        self._execution_count = 0
        self._success_count = 0
        self._failure_count = 0
        self._total_execution_time = 0.0

    async def execute_command(
        self, resource: ServiceResource, command_name: str
    ) -> CommandResult:
        """
        Execute a resource command once.

        Args:
            resource: Resource owning the command
            command_name: Name of the command to execute

        Returns:
            CommandResult with execution status

        Raises:
            ValueError: When command_name is not registered on the resource
        """
        command = resource.commands.get_command(command_name)

        start_time = time.time()
        self._execution_count += 1

        state = command.update_state(resource.snapshot())
        if state != CommandState.ENABLED:
            logger.info(
                f"Command '{command_name}' on '{resource.name}' is {state.value}, not executing"
            )
            result = CommandResult.failure(f"Command '{command_name}' is disabled")
            self._record(result, start_time)
            return result

        context = ExecuteCommandContext(resource_name=resource.name)

        try:
            result = await asyncio.wait_for(
                command.execute(context), timeout=self._default_timeout_seconds
            )

        except asyncio.TimeoutError:
            logger.error(
                f"Command '{command_name}' on '{resource.name}' timed out "
                f"after {self._default_timeout_seconds}s"
            )
            result = CommandResult.failure(
                f"Command execution timed out after {self._default_timeout_seconds}s"
            )

        except Exception as e:
            logger.error(
                f"Command '{command_name}' on '{resource.name}' raised exception: {str(e)}",
                exc_info=True,
            )
            result = CommandResult.failure(str(e))

        execution_time = self._record(result, start_time)
        status_msg = "successfully" if result.is_success() else "with errors"
        logger.info(
            f"Command '{command_name}' on '{resource.name}' completed {status_msg} "
            f"in {execution_time:.2f}ms"
        )
        return result

    def _record(self, result: CommandResult, start_time: float) -> float:
        """Update metrics for a finished execution and return its duration in ms"""
        execution_time = (time.time() - start_time) * 1000
        self._total_execution_time += execution_time
        if result.is_success():
            self._success_count += 1
        else:
            self._failure_count += 1
        return execution_time

    def get_execution_metrics(self) -> Dict[str, Any]:
        """
        Get execution metrics for monitoring and debugging.

        Returns:
            Dictionary containing execution statistics
        """
        avg_execution_time = (
            self._total_execution_time / self._execution_count
            if self._execution_count > 0
            else 0
        )

        success_rate = (
            (self._success_count / self._execution_count) * 100
            if self._execution_count > 0
            else 0
        )

        return {
            "total_executions": self._execution_count,
            "successful_executions": self._success_count,
            "failed_executions": self._failure_count,
            "success_rate_percent": round(success_rate, 2),
            "average_execution_time_ms": round(avg_execution_time, 2),
            "total_execution_time_ms": round(self._total_execution_time, 2),
            "default_timeout_seconds": self._default_timeout_seconds,
        }

    def reset_metrics(self) -> None:
        """Reset execution metrics (useful for testing)"""
        self._execution_count = 0
        self._success_count = 0
        self._failure_count = 0
        self._total_execution_time = 0.0
        logger.info("Execution metrics reset")
