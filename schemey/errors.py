from __future__ import annotations

from typing import Any


def _render(value: Any) -> str:
    from schemey.printer import render
    return render(value)


class SchemeyError(Exception):
    """ Base class for all Schemey errors"""
    pass


class NumArgs(SchemeyError):
    """ Raised when a procedure receives the wrong number of arguments"""

    def __init__(self, expected: int, found: list[Any]):
        super().__init__(expected, found)
        self.expected = expected
        self.found = list(found)

    def __str__(self) -> str:
        found = " ".join(_render(v) for v in self.found)
        return f"Expected {self.expected} args; found values {found}"


class TypeMismatch(SchemeyError):
    """ Raised when an argument has the wrong kind of value"""

    def __init__(self, expected: str, found: Any):
        super().__init__(expected, found)
        self.expected = expected
        self.found = found

    def __str__(self) -> str:
        return f"Invalid type: expected {self.expected}, found {_render(self.found)}"


class ParseFailure(SchemeyError):
    """ Raised when source text cannot be read"""

    def __init__(self, message: str, line: int = 1, column: int = 1):
        super().__init__(message, line, column)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f'Parse error at "schemey" (line {self.line}, column {self.column}): {self.message}'


class BadSpecialForm(SchemeyError):
    """ Raised when an expression matches no evaluation rule"""

    def __init__(self, message: str, form: Any):
        super().__init__(message, form)
        self.message = message
        self.form = form

    def __str__(self) -> str:
        return f"{self.message}: {_render(self.form)}"


class NotFunction(SchemeyError):
    """ Raised when a non-procedure is applied"""

    def __init__(self, message: str, value: Any):
        super().__init__(message, value)
        self.message = message
        self.value = value

    def __str__(self) -> str:
        return f"{self.message}: {_render(self.value)}"


class UnboundVar(SchemeyError):
    """ Raised when a name is read or set before it is bound"""

    def __init__(self, message: str, name: str):
        super().__init__(message, name)
        self.message = message
        self.name = name

    def __str__(self) -> str:
        return f"{self.message}: {self.name}"


class GenericError(SchemeyError):
    """ Raised for failures without a more specific kind"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Error: {self.message}"
