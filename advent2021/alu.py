"""A small interpreter for the ALU instruction set used by MONAD programs."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Sequence, Union

REGISTERS = "wxyz"
_LINE = re.compile(r"^(\w+)\s([-a-z0-9]+)(\s([-a-z0-9]+))?$")

Operand = Union[int, str, None]


class Operation(str, Enum):
    """The ALU operations."""

    INP = "inp"
    ADD = "add"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    EQL = "eql"


@dataclass(frozen=True)
class AluState:
    """Register values plus the input digits and how many have been read."""

    w: int = 0
    x: int = 0
    y: int = 0
    z: int = 0
    inputs: str = ""
    position: int = 0

    def register(self, name: str) -> int:
        """Return the value held in register ``name``."""
        if name not in REGISTERS:
            raise ValueError(f"unknown register {name!r}")
        return getattr(self, name)

    def with_register(self, name: str, value: int) -> AluState:
        """Return a copy with register ``name`` set to ``value``."""
        if name not in REGISTERS:
            raise ValueError(f"unknown register {name!r}")
        return replace(self, **{name: value})


def _trunc_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("ALU division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("ALU modulo by zero")
    return a - b * _trunc_div(a, b)


@dataclass(frozen=True)
class Instruction:
    """One ALU instruction: an operation, a target register and an operand.

    The operand is a register name, an integer literal, or None for ``inp``.
    """

    operation: Operation
    target: str
    operand: Operand = None

    def _operand_value(self, state: AluState) -> int:
        if self.operand is None:
            raise ValueError(f"{self.operation.value} needs a second operand")
        if isinstance(self.operand, str):
            return state.register(self.operand)
        return self.operand

    def apply(self, state: AluState) -> AluState:
        """Execute this instruction and return the resulting state."""
        if self.operation is Operation.INP:
            if state.position >= len(state.inputs):
                raise ValueError("program reads more input than was given")
            digit = ord(state.inputs[state.position]) - ord("0")
            return replace(
                state.with_register(self.target, digit), position=state.position + 1
            )
        a = state.register(self.target)
        b = self._operand_value(state)
        if self.operation is Operation.ADD:
            result = a + b
        elif self.operation is Operation.MUL:
            result = a * b
        elif self.operation is Operation.DIV:
            result = _trunc_div(a, b)
        elif self.operation is Operation.MOD:
            result = _trunc_mod(a, b)
        else:
            result = int(a == b)
        return state.with_register(self.target, result)


def _parse_operand(text: Optional[str]) -> Operand:
    if not text:
        return None
    if text[0] in REGISTERS:
        return text
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid operand {text!r}") from None


def compile_program(rows: Iterable[str]) -> list[Instruction]:
    """Parse program lines into instructions; blank lines are skipped."""
    program: list[Instruction] = []
    for row in rows:
        line = row.strip()
        if not line:
            continue
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"cannot parse instruction {row!r}")
        name, target, operand = match.group(1), match.group(2), match.group(4)
        try:
            operation = Operation(name)
        except ValueError:
            raise ValueError(f"unknown operation {name!r}") from None
        if target not in REGISTERS:
            raise ValueError(f"invalid target register {target!r}")
        parsed = _parse_operand(operand)
        if operation is not Operation.INP and parsed is None:
            raise ValueError(f"{name} needs a second operand in {row!r}")
        program.append(Instruction(operation, target, parsed))
    return program


def run(program: Sequence[Instruction], digits: Union[str, int]) -> AluState:
    """Run ``program`` on the given input digits and return the final state."""
    state = AluState(inputs=str(digits))
    for instruction in program:
        state = instruction.apply(state)
    return state


def is_valid_model_number(program: Sequence[Instruction], digits: Union[str, int]) -> bool:
    """Return True if the program leaves zero in register z."""
    return run(program, digits).z == 0