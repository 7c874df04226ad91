from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

from .solver.constraint import Constraint
from .solver.expression import Expression, Variable

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxdict = 8


def _summarize(value: Any, *, max_items: int = 5, max_length: int = 300) -> str:
    if isinstance(value, Variable):
        return f"{value.name}={value.value:.6g}"
    if isinstance(value, Expression):
        return f"expr[{len(value.terms)} terms, const={value.constant:.6g}]"
    if isinstance(value, Constraint):
        return f"{value.relation}@{value.strength.name}[{len(value.expression.terms)} terms]"

    if isinstance(value, (list, tuple)):
        items = [_summarize(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... ({len(value)} total)")
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return f"{open_br}{', '.join(items)}{close_br}"

    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - repr of foreign objects
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_summarize(arg) for arg in args) + "]")
    if kwargs:
        parts.append("kwargs={" + ", ".join(f"{key}={_summarize(val)}" for key, val in kwargs.items()) + "}")
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs on entry, exit and failure."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.exception("Exception in %s", qualname)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, _summarize(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap public functions and methods defined in ``namespace`` with DEBUG logging."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name.startswith("_") or name in skip_set:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value) and value.__module__ == module_name:
            for attr_name, attr_value in list(vars(value).items()):
                qualified = f"{value.__name__}.{attr_name}"
                if attr_name.startswith("_") or qualified in skip_set:
                    continue
                if inspect.isfunction(attr_value):
                    setattr(value, attr_name, debug_log_call(logger, name=qualified)(attr_value))
