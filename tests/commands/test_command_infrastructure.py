import asyncio

import pytest

from src.commands.executor.command_executor import CommandExecutor
from src.commands.interfaces.command import Command
from src.commands.interfaces.command_context import (
    ExecuteCommandContext,
    UpdateStateContext,
)
from src.commands.interfaces.command_result import CommandResult
from src.commands.registry.command_registry import CommandRegistry
from src.core.resources.service_resource import ServiceResource
from src.models.types import CommandState, HealthStatus


class StubCommand(Command):
    """Always-enabled command with a configurable outcome"""

    def __init__(self, name: str = "stub", outcome=None, delay: float = 0.0):
        super().__init__()
        self._name = name
        self._outcome = outcome if outcome is not None else CommandResult.ok()
        self._delay = delay
        self.calls = 0

    def get_command_name(self) -> str:
        return self._name

    def get_display_name(self) -> str:
        return self._name.title()

    def update_state(self, context: UpdateStateContext) -> CommandState:
        return CommandState.ENABLED

    async def execute(self, context: ExecuteCommandContext) -> CommandResult:
        self.calls += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome


class HealthGatedCommand(StubCommand):
    def update_state(self, context: UpdateStateContext) -> CommandState:
        if context.health_status == HealthStatus.HEALTHY:
            return CommandState.ENABLED
        return CommandState.DISABLED


class TestCommandContext:
    """Test command context objects"""

    def test_execute_context_requires_resource_name(self) -> None:
        with pytest.raises(ValueError, match="resource_name is required"):
            ExecuteCommandContext(resource_name="")

    def test_update_state_context_defaults_to_unknown_health(self) -> None:
        assert UpdateStateContext(resource_name="api").health_status is None


class TestCommandResult:
    """Test CommandResult functionality"""

    def test_success_result_creation(self) -> None:
        result = CommandResult.ok()

        assert result.is_success()
        assert not result.is_failure()
        assert result.error_message is None

    def test_failure_result_creation(self) -> None:
        result = CommandResult.failure("Service URL not found")

        assert result.is_failure()
        assert not result.is_success()
        assert result.success is False
        assert result.error_message == "Service URL not found"


class TestCommandRegistry:
    """Test CommandRegistry functionality"""

    def test_add_and_get_command(self) -> None:
        registry = CommandRegistry("api")
        command = StubCommand("docs")

        registry.add_command(command)

        assert registry.get_command("docs") is command
        assert registry.find_command("docs") is command
        assert registry.get_available_commands() == ["docs"]

    def test_duplicate_command_name_rejected(self) -> None:
        registry = CommandRegistry("api")
        registry.add_command(StubCommand("docs"))

        with pytest.raises(ValueError, match="Command 'docs' already exists on resource 'api'"):
            registry.add_command(StubCommand("docs"))

    def test_unknown_command(self) -> None:
        registry = CommandRegistry("api")
        registry.add_command(StubCommand("docs"))

        with pytest.raises(ValueError, match="Command 'missing' not found"):
            registry.get_command("missing")
        assert registry.find_command("missing") is None

    def test_available_commands_keep_registration_order(self) -> None:
        registry = CommandRegistry("api")
        for name in ["b", "a", "c"]:
            registry.add_command(StubCommand(name))

        assert registry.get_available_commands() == ["b", "a", "c"]

    def test_get_command_info(self) -> None:
        registry = CommandRegistry("api")
        registry.add_command(HealthGatedCommand("docs"))

        info = registry.get_command_info(
            "docs", UpdateStateContext(resource_name="api", health_status=None)
        )

        assert info == {
            "name": "docs",
            "display_name": "Docs",
            "icon_name": "Document",
            "icon_variant": "Filled",
            "state": "Disabled",
        }


class TestCommandExecutor:
    """Test CommandExecutor functionality"""

    @pytest.mark.asyncio
    async def test_execute_success(self, api_resource: ServiceResource) -> None:
        command = StubCommand("docs")
        api_resource.with_command(command)
        executor = CommandExecutor()

        result = await executor.execute_command(api_resource, "docs")

        assert result.is_success()
        assert command.calls == 1

        metrics = executor.get_execution_metrics()
        assert metrics["total_executions"] == 1
        assert metrics["successful_executions"] == 1
        assert metrics["failed_executions"] == 0
        assert metrics["success_rate_percent"] == 100.0

    @pytest.mark.asyncio
    async def test_unknown_command_raises(self, api_resource: ServiceResource) -> None:
        executor = CommandExecutor()

        with pytest.raises(ValueError, match="Command 'missing' not found"):
            await executor.execute_command(api_resource, "missing")

    @pytest.mark.asyncio
    async def test_disabled_command_is_not_executed(
        self, api_resource: ServiceResource
    ) -> None:
        command = HealthGatedCommand("docs")
        api_resource.with_command(command)
        api_resource.report_health(HealthStatus.UNHEALTHY)
        executor = CommandExecutor()

        result = await executor.execute_command(api_resource, "docs")

        assert result.is_failure()
        assert result.error_message == "Command 'docs' is disabled"
        assert command.calls == 0

    @pytest.mark.asyncio
    async def test_failed_result_is_returned(self, api_resource: ServiceResource) -> None:
        api_resource.with_command(
            StubCommand("docs", outcome=CommandResult.failure("Service URL not found"))
        )
        executor = CommandExecutor()

        result = await executor.execute_command(api_resource, "docs")

        assert result.error_message == "Service URL not found"
        assert executor.get_execution_metrics()["failed_executions"] == 1

    @pytest.mark.asyncio
    async def test_exception_becomes_failure(self, api_resource: ServiceResource) -> None:
        api_resource.with_command(StubCommand("docs", outcome=RuntimeError("boom")))
        executor = CommandExecutor()

        result = await executor.execute_command(api_resource, "docs")

        assert result.is_failure()
        assert result.error_message == "boom"

    @pytest.mark.asyncio
    async def test_timeout_becomes_failure(self, api_resource: ServiceResource) -> None:
        api_resource.with_command(StubCommand("slow", delay=1.0))
        executor = CommandExecutor(default_timeout_seconds=0.01)

        result = await executor.execute_command(api_resource, "slow")

        assert result.is_failure()
        assert "timed out" in result.error_message

    @pytest.mark.asyncio
    async def test_no_retry_after_failure(self, api_resource: ServiceResource) -> None:
        command = StubCommand("docs", outcome=RuntimeError("boom"))
        api_resource.with_command(command)
        executor = CommandExecutor()

        await executor.execute_command(api_resource, "docs")

        assert command.calls == 1

    @pytest.mark.asyncio
    async def test_reset_metrics(self, api_resource: ServiceResource) -> None:
        api_resource.with_command(StubCommand("docs"))
        executor = CommandExecutor()
        await executor.execute_command(api_resource, "docs")

        executor.reset_metrics()

        metrics = executor.get_execution_metrics()
        assert metrics["total_executions"] == 0
        assert metrics["success_rate_percent"] == 0
