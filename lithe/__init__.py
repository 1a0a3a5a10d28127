"""
lithe - minimal immutable undo/redo history.

Main modules:
- history    - immutable HistoryState and the execute/undo/redo/clear transitions
- undo_stack - UndoCommand base class and the mutable UndoStack holder
- log        - logging facade
"""

from lithe import log  # noqa: F401
from lithe.history import (
    Command,
    HistoryState,
    Options,
    Reversible,
    can,
    can_redo,
    can_undo,
    clear,
    create_history,
    execute,
    redo,
    undo,
)
from lithe.undo_stack import UndoCommand, UndoStack

__version__ = '0.1.0'

__all__ = [
    # History
    'Command',
    'HistoryState',
    'Options',
    'Reversible',
    'can',
    'can_redo',
    'can_undo',
    'clear',
    'create_history',
    'execute',
    'redo',
    'undo',
    # Object wrapper
    'UndoCommand',
    'UndoStack',
]
