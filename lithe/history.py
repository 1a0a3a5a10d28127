"""
lithe.history - immutable undo/redo history.

Every transition takes a HistoryState and returns a new one; the input is
never modified. The caller keeps the reference to the latest state.

Usage:
    from lithe.history import Command, create_history, execute, undo, redo

    box = {"value": 0}

    def add(n):
        def apply():
            box["value"] += n
            return dict(box)

        def invert():
            box["value"] -= n
            return dict(box)

        return Command(apply, invert, name=f"add {n}")

    state = create_history(dict(box), {"max_depth": 5})
    state = execute(state, add(3))   # state.current == {"value": 3}
    state = undo(state)              # state.current == {"value": 0}
    state = redo(state)              # state.current == {"value": 3}
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Mapping, Optional, Protocol, Tuple, TypeVar, Union

from lithe import log

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

DEFAULT_MAX_DEPTH = 10


class Reversible(Protocol[T_co]):
    """Anything with zero-argument apply() and invert() returning the new value."""

    def apply(self) -> T_co: ...

    def invert(self) -> T_co: ...


@dataclass(frozen=True)
class Command(Generic[T]):
    """
    Reversible operation built from two callbacks.

    apply() performs the forward change, invert() the reverse one; both
    return the resulting value. The engine trusts them to be inverses and
    never looks at the value they affect. name is only used in log output.
    """

    apply: Callable[[], T]
    invert: Callable[[], T]
    name: Optional[str] = None

    def named(self, name: str) -> Command[T]:
        return replace(self, name=name)


@dataclass(frozen=True)
class Options:
    """
    History configuration.

    max_depth bounds both the undo and the redo stack. None means unbounded,
    0 (or less) keeps the stacks empty.
    """

    max_depth: Optional[int] = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class HistoryState(Generic[T]):
    """
    Immutable snapshot of the history.

    current is the latest value, undo_stack and redo_stack hold commands
    with the most recent one last. Transitions return new instances.
    """

    current: T
    config: Options = field(default_factory=Options)
    undo_stack: Tuple[Reversible[T], ...] = ()
    redo_stack: Tuple[Reversible[T], ...] = ()


def _describe(command: Any) -> str:
    name = getattr(command, "name", None)
    return name if name else type(command).__name__


def _trace(action: str, command: Any, undo_stack: Tuple[Any, ...], redo_stack: Tuple[Any, ...]) -> None:
    if log.enabled():
        log.debug("%s %s: undo=%d redo=%d", action, _describe(command), len(undo_stack), len(redo_stack))


def _push(stack: Tuple[Any, ...], command: Any, max_depth: Optional[int]) -> Tuple[Any, ...]:
    """Return stack + (command,), dropping entries from the front to fit max_depth."""
    maxlen = None if max_depth is None else max(max_depth, 0)
    bounded = deque(stack, maxlen=maxlen)
    if maxlen is not None and len(bounded) >= maxlen:
        evicted = bounded[0] if bounded else command
        if log.enabled():
            log.debug("history full (max_depth=%d), evicting %s", maxlen, _describe(evicted))
    bounded.append(command)
    return tuple(bounded)


def create_history(
    initial: T,
    options: Union[Options, Mapping[str, Any], None] = None,
) -> HistoryState[T]:
    """
    Create a new history around an initial value.

    options may be an Options instance or a mapping of overrides merged
    over the defaults, e.g. {"max_depth": 3}.
    """
    if options is None:
        config = Options()
    elif isinstance(options, Options):
        config = options
    else:
        config = replace(Options(), **dict(options))
    return HistoryState(current=initial, config=config)


def execute(state: HistoryState[T], command: Reversible[T]) -> HistoryState[T]:
    """
    Apply a new command and record it for undo.

    The redo branch is always discarded: a new action starts a new future.
    Exceptions raised by command.apply() propagate to the caller.
    """
    current = command.apply()
    undo_stack = _push(state.undo_stack, command, state.config.max_depth)
    _trace("execute", command, undo_stack, ())
    return replace(state, current=current, undo_stack=undo_stack, redo_stack=())


def undo(state: HistoryState[T]) -> HistoryState[T]:
    """
    Revert the most recent command and move it to the redo stack.

    Returns the same state when there is nothing to undo.
    """
    if not state.undo_stack:
        return state

    command = state.undo_stack[-1]
    current = command.invert()
    undo_stack = state.undo_stack[:-1]
    redo_stack = _push(state.redo_stack, command, state.config.max_depth)
    _trace("undo", command, undo_stack, redo_stack)
    return replace(state, current=current, undo_stack=undo_stack, redo_stack=redo_stack)


def redo(state: HistoryState[T]) -> HistoryState[T]:
    """
    Re-apply the most recently undone command and move it back to the undo stack.

    The command's apply() is called again, no value is cached. Returns the
    same state when there is nothing to redo.
    """
    if not state.redo_stack:
        return state

    command = state.redo_stack[-1]
    current = command.apply()
    redo_stack = state.redo_stack[:-1]
    undo_stack = _push(state.undo_stack, command, state.config.max_depth)
    _trace("redo", command, undo_stack, redo_stack)
    return replace(state, current=current, undo_stack=undo_stack, redo_stack=redo_stack)


def clear(state: HistoryState[T]) -> HistoryState[T]:
    """
    Drop all undo/redo history, keeping the current value and config.
    Resetting the value itself is up to the caller.
    """
    return HistoryState(current=state.current, config=state.config)


def can_undo(state: HistoryState[Any]) -> bool:
    return len(state.undo_stack) > 0


def can_redo(state: HistoryState[Any]) -> bool:
    return len(state.redo_stack) > 0


class _Can:
    """Predicate namespace: can.undo(state), can.redo(state)."""

    undo = staticmethod(can_undo)
    redo = staticmethod(can_redo)


can = _Can()
