"""
Adapters that turn user-supplied guards and hooks into the canonical async form.

Guards may be written as ``f()``, ``f(state)`` or ``f(state, input)`` and hooks
as ``f()`` or ``f(transition)``. Either kind may be a plain function or a
coroutine function. Everything is wrapped once at registration time so the
engine only ever awaits ``guard(state, input)`` and ``hook(transition)``.
"""

import inspect
from typing import Any, Callable

from .models import Transition


def _positional_arity(func: Callable, maximum: int) -> int:
    """Number of positional arguments ``func`` accepts, capped at ``maximum``."""
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtins and some C callables have no introspectable signature
        return maximum

    count = 0
    for param in sig.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return maximum
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return min(count, maximum)


def _ensure_callable(func: Any, kind: str) -> None:
    if not callable(func):
        raise TypeError(f"{kind} must be callable, got {type(func).__name__}")


class GuardWrapper:
    """Wrapper exposing any supported guard shape as ``await guard(state, input)``."""

    def __init__(self, func: Callable):
        _ensure_callable(func, "Guard")
        self.func = func
        self.original_name = getattr(func, "__name__", repr(func))
        self.arity = _positional_arity(func, 2)

    async def __call__(self, state: Any, input: Any) -> bool:
        args = (state, input)[:self.arity]
        result = self.func(*args)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    def __repr__(self) -> str:
        return f"GuardWrapper({self.original_name})"


class HookWrapper:
    """Wrapper exposing any supported hook shape as ``await hook(transition)``."""

    def __init__(self, func: Callable):
        _ensure_callable(func, "Hook")
        self.func = func
        self.original_name = getattr(func, "__name__", repr(func))
        self.arity = _positional_arity(func, 1)

    async def __call__(self, transition: Transition) -> None:
        if self.arity:
            result = self.func(transition)
        else:
            result = self.func()
        if inspect.isawaitable(result):
            await result

    def __repr__(self) -> str:
        return f"HookWrapper({self.original_name})"


def as_guard(func: Callable) -> GuardWrapper:
    """Wrap ``func`` as a canonical guard, reusing an existing wrapper."""
    if isinstance(func, GuardWrapper):
        return func
    return GuardWrapper(func)


def as_hook(func: Callable) -> HookWrapper:
    """Wrap ``func`` as a canonical hook, reusing an existing wrapper."""
    if isinstance(func, HookWrapper):
        return func
    return HookWrapper(func)
