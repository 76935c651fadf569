# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for the wizard host controllers.

Hosts sit between the views and the wizard core: they validate user input,
call the draft controller and report outcomes as OperationResult values
instead of raising.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a host operation, shown to the user as a toast."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None, data: T = None) -> 'OperationResult[T]':
        return cls(success=False, data=data, message=message, errors=list(errors or []))

    def __bool__(self) -> bool:
        return self.success


class BaseController(QObject):
    """
    Base host controller.

    Emits operation_started / operation_completed around host callbacks so
    views can show a busy indicator, and operation_error with a readable
    message when a callback or calculation fails.
    """

    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message

    def __init__(self, parent=None):
        super().__init__(parent)
        self._last_error = ""

    @property
    def last_error(self) -> str:
        """Message of the most recent failure, empty if none."""
        return self._last_error

    def _log_operation(self, operation: str, **details):
        logger.info(f"{self.__class__.__name__}.{operation}: {details}")

    def _emit_error(self, operation: str, error: str):
        self._last_error = error
        logger.error(f"{self.__class__.__name__}.{operation} failed: {error}")
        self.operation_error.emit(operation, error)

    def execute_with_error_handling(
        self,
        operation: str,
        func: Callable[..., Any],
        *args,
        **kwargs
    ) -> OperationResult:
        """
        Run a host callback, turning any exception into a failed result.

        Returns:
            OperationResult with the callback's return value as data
        """
        self.operation_started.emit(operation)
        try:
            value = func(*args, **kwargs)
        except Exception as e:
            self._emit_error(operation, str(e))
            self.operation_completed.emit(operation, False)
            return OperationResult.fail(str(e))

        self._last_error = ""
        self.operation_completed.emit(operation, True)
        return OperationResult.ok(data=value)
