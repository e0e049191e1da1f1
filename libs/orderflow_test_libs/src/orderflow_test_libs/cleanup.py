"""Registry for test-scoped teardown actions with reverse-order cleanup."""

from __future__ import annotations

from typing import Awaitable, Callable

from orderflow_test_libs.logging_utils import create_harness_logger

logger = create_harness_logger("orderflow.cleanup")

CleanupAction = Callable[[], Awaitable[None]]


class CleanupRegistry:
    """Collects teardown actions during a test and runs them afterwards.

    Actions run in reverse registration order, mirroring the order in which
    the resources they release were acquired. A failing action is logged and
    does not stop the remaining ones. One registry belongs to one test; the
    ``test_cleanup`` fixture creates it and calls ``run_all`` after the test
    body whatever its outcome.
    """

    def __init__(self) -> None:
        self._actions: list[CleanupAction] = []

    def __len__(self) -> int:
        return len(self._actions)

    def register(self, action: CleanupAction) -> None:
        """Register an async teardown action."""
        self._actions.append(action)
        logger.debug(
            "Registered cleanup action",
            action=getattr(action, "__name__", repr(action)),
            pending=len(self._actions),
        )

    async def run_all(self) -> list[Exception]:
        """Run every registered action, last registered first.

        The registry is empty afterwards and can be reused.

        Returns:
            The exceptions raised by failing actions, in execution order. They
            are reported through logging and never re-raised so that they
            cannot mask the outcome of the test itself.
        """
        actions, self._actions = self._actions, []
        errors: list[Exception] = []

        for action in reversed(actions):
            name = getattr(action, "__name__", repr(action))
            try:
                await action()
            except Exception as e:
                errors.append(e)
                logger.error(
                    "Cleanup error",
                    action=name,
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=True,
                )

        if errors:
            logger.warning(f"Cleanup finished with {len(errors)}/{len(actions)} failures")
        return errors
