"""Procedure values: native primitives and user-defined closures."""

from __future__ import annotations

from io import StringIO
from typing import Optional

from schemey import SExpression, LispValue, PrimitiveFn
from schemey.types.environment import Environment


class Primitive:
    """A native procedure registered in the root environment."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"


class Closure:
    """A first-class procedure with parameters, an optional rest parameter,
    a body and the environment captured where it was created."""

    __slots__ = ("params", "vararg", "body", "env")

    def __init__(
        self,
        params: list[str],
        vararg: Optional[str],
        body: list[SExpression],
        env: Environment,
    ):
        self.params: list[str] = params
        self.vararg: Optional[str] = vararg
        self.body: list[SExpression] = body
        self.env: Environment = env

    def bind_arguments(self, args: list[LispValue]) -> Environment:
        """Extend the captured environment with parameters bound to `args`.

        The caller checks arity first; surplus arguments go to the rest
        parameter as a list.
        """
        fixed = len(self.params)
        env = self.env.extend(zip(self.params, args))
        if self.vararg is not None:
            env = env.extend([(self.vararg, list(args[fixed:]))])
        return env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            if self.vararg is not None:
                if self.params:
                    buffer.write(" ")
                buffer.write(f". {self.vararg}")
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
