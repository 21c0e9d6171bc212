"""
Invocation adapter.

Runs the business function under one asynchronous contract, whichever calling
convention it follows:

- value returning: ``fn(data)`` returns a value or an awaitable
- completion callback: ``fn(data, callback)`` later calls ``callback(error, result)``

Both completion paths write into the same one-shot ``OutcomeFuture``. The first
write wins and later writes are dropped silently. Callback writes are scheduled
on the event loop while direct results are written as soon as the call (or the
await) returns, so a direct result produced in the same step as a callback
takes precedence.

Errors never cross this boundary: raised exceptions, rejected awaitables and
callback errors all become a ``Failure``.
"""

import asyncio
import inspect
from typing import Any, Callable, Dict, Optional

from event_wrapper.handlers.utils.observability import logger as default_logger
from event_wrapper.handlers.utils.observability import tracer
from event_wrapper.models.outcome import ExecutionOutcome, Failure, Success


class InvocationError(Exception):
    """Raised in place of a non-exception error value passed to the callback."""

    def __init__(self, message: str, error: Any = None):
        super().__init__(message)
        self.error = error


def as_exception(error: Any) -> BaseException:
    if isinstance(error, BaseException):
        return error
    return InvocationError(str(error), error=error)


REQUIRED_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def accepts_callback(fn: Callable[..., Any]) -> bool:
    """
    Check whether ``fn`` requires a second positional argument for the callback.

    Defaulted parameters and ``*args`` do not count, so ``fn(data, verbose=False)``
    and undecorated ``*args, **kwargs`` wrappers are called with ``data`` only.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return False
    required = [
        parameter for parameter in signature.parameters.values()
        if parameter.kind in REQUIRED_POSITIONAL_KINDS and parameter.default is inspect.Parameter.empty
    ]
    return len(required) >= 2


class OutcomeFuture:
    """One-shot holder for the outcome of a single invocation."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self._loop = loop
        self._future: asyncio.Future = loop.create_future()

    @property
    def done(self) -> bool:
        return self._future.done()

    def settle(self, outcome: ExecutionOutcome) -> bool:
        """Store ``outcome`` unless one is already stored. Must run on the loop."""
        if self._future.done():
            return False
        self._future.set_result(outcome)
        return True

    def settle_soon(self, outcome: ExecutionOutcome) -> None:
        """Schedule ``settle`` on the loop, safe to call from any thread."""
        if self._loop.is_closed():
            return
        try:
            self._loop.call_soon_threadsafe(self.settle, outcome)
        except RuntimeError:
            # loop closed after the check above
            return

    def callback(self, error: Any = None, result: Any = None) -> None:
        """Completion callback handed to callback-style business functions."""
        if error is not None:
            self.settle_soon(Failure(as_exception(error)))
        else:
            self.settle_soon(Success(result))

    def __await__(self):
        return self._future.__await__()


@tracer.capture_method(capture_response=False)
async def invoke(fn: Callable[..., Any], data: Dict[str, Any], logger=default_logger) -> ExecutionOutcome:
    """
    Run ``fn`` with ``data`` and wait until it completes.

    A callback-style function that returns ``None`` is considered still running
    until it calls its callback. There is no timeout; the Lambda runtime's own
    timeout applies.

    Args:
        fn: Business function, sync or async, with or without a callback parameter
        data: Normalized input
        logger: Receives invocation failures

    Returns:
        Exactly one Success or Failure
    """
    holder = OutcomeFuture(asyncio.get_running_loop())
    uses_callback = accepts_callback(fn)

    try:
        result: Optional[Any] = fn(data, holder.callback) if uses_callback else fn(data)
        if inspect.isawaitable(result):
            result = await result
    except Exception as exc:
        holder.settle(Failure(exc))
    else:
        if result is not None or not uses_callback:
            holder.settle(Success(result))

    outcome = await holder
    if isinstance(outcome, Failure):
        logger.error({
            'message': 'Business function failed',
            'error': str(outcome.error),
            'error_type': type(outcome.error).__name__,
        })
    return outcome
