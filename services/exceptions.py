# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class PreconditionException(Exception):
    """Exception raised when a caller breaks an API precondition."""

    def __init__(self, message: str, argument: str = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.argument = argument
        self.context = context


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context

    def __str__(self):
        if self.field:
            return f"[{self.field}] {self.message}"
        return self.message


class StorageException(Exception):
    """Exception raised when a stored record cannot be read back."""

    def __init__(self, message: str, key: str = None,
                 original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.key = key
        self.original_error = original_error
