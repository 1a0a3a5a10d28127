from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from lithe import history
from lithe.history import HistoryState, Options, Reversible

T = TypeVar("T")

# max_depth=None already means "unbounded"
_UNSET = object()


class UndoCommand(Generic[T]):
    """
    Base class for commands written as objects instead of closures.

    Subclasses override:
    - apply()  - brings the target to the "new" value and returns it;
    - invert() - brings the target back to the "old" value and returns it.

    Instances can be passed straight to history.execute().
    """

    def __init__(self, name: str = "") -> None:
        self.name = name

    def apply(self) -> T:
        raise NotImplementedError

    def invert(self) -> T:
        raise NotImplementedError


class UndoStack(Generic[T]):
    """
    Mutable holder for a single HistoryState.

    Each call replaces the held state with the result of the matching
    function from lithe.history, so the history itself stays immutable and
    older states handed out through `state` remain valid snapshots.

    There is no locking: one owner, one thread.
    """

    def __init__(
        self,
        initial: T,
        max_depth: Any = _UNSET,
        options: Union[Options, Mapping[str, Any], None] = None,
    ) -> None:
        if options is None:
            depth = history.DEFAULT_MAX_DEPTH if max_depth is _UNSET else max_depth
            options = Options(max_depth=depth)
        elif max_depth is not _UNSET:
            raise TypeError("pass either max_depth or options, not both")
        self._state: HistoryState[T] = history.create_history(initial, options)

    @property
    def state(self) -> HistoryState[T]:
        return self._state

    @property
    def current(self) -> T:
        return self._state.current

    @property
    def can_undo(self) -> bool:
        return history.can_undo(self._state)

    @property
    def can_redo(self) -> bool:
        return history.can_redo(self._state)

    @property
    def max_depth(self) -> Optional[int]:
        return self._state.config.max_depth

    def push(self, cmd: Reversible[T]) -> T:
        """
        Executes the command and records it. The redo branch is dropped.
        If cmd.apply() raises, the held state is left as it was.
        """
        self._state = history.execute(self._state, cmd)
        return self._state.current

    def undo(self) -> T:
        """Reverts the last executed command, if any."""
        self._state = history.undo(self._state)
        return self._state.current

    def redo(self) -> T:
        """Re-applies the last undone command, if any."""
        self._state = history.redo(self._state)
        return self._state.current

    def clear(self) -> None:
        """
        Drops undo/redo history. The current value is not touched,
        resetting it is the caller's business.
        """
        self._state = history.clear(self._state)

    def __len__(self) -> int:
        """Number of commands that can be undone."""
        return len(self._state.undo_stack)
