# Copyright (c) Microsoft. All rights reserved.

from collections.abc import Callable
from typing import Any, Literal

LifecycleState = Literal["experimental"]


def _kind(func_or_class: Any) -> str:
    return "class" if isinstance(func_or_class, type) else "function"


def _append_note(func_or_class: Any, state: LifecycleState, note: str | None) -> Any:
    """Append the lifecycle note to the docstring of the object."""
    extra = f"Note: This {_kind(func_or_class)} is {state} and {note or 'may change in the future'}."
    func_or_class.__doc__ = f"{func_or_class.__doc__}\n\n{extra}" if func_or_class.__doc__ else extra
    return func_or_class


def _lifecycle(attribute: str, state: LifecycleState, func_or_class: Any, note: str | None) -> Any:
    def decorator(target: Any) -> Any:
        setattr(target, attribute, note or f"This {_kind(target)} is {state}.")
        return _append_note(target, state, note)

    if func_or_class is not None:
        return decorator(func_or_class)
    return decorator


def experimental(func_or_class: Any = None, note: str | None = None) -> Callable[..., Any] | Any:
    """Decorator to mark a function or class as experimental.

    Sets `__experimental__` on the object and appends to its docstring:
        Note: This class is experimental and {note}.
    or, without a note:
        Note: This class is experimental and may change in the future.

    Args:
        func_or_class: The function or class to decorate, when used without arguments.
        note: The note to add to the docstring.

    Returns:
        The decorated function or class, or a decorator when called with only a note.
    """
    return _lifecycle("__experimental__", "experimental", func_or_class, note)

