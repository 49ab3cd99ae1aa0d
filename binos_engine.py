#!/usr/bin/env python3
"""
Bitwise operation engine for Binary OS
Applies AND/OR/XOR/NOT/NAND/NOR/XNOR bit by bit to binary strings
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

MAX_BITS = 8
BITS = ('0', '1')


class EngineError(ValueError):
    """Base class for all engine errors"""


class InvalidOperand(EngineError):
    """A binary string is empty, too long or contains something other than 0/1"""


class InvalidOperation(EngineError):
    """The operation name is not one of the supported operations"""


class OperandArityMismatch(EngineError):
    """NOT received a second operand, or a binary operation is missing one"""


class Operation(Enum):
    AND = 'AND'
    OR = 'OR'
    XOR = 'XOR'
    NOT = 'NOT'
    NAND = 'NAND'
    NOR = 'NOR'
    XNOR = 'XNOR'

    @property
    def is_unary(self):
        return self is Operation.NOT

    @classmethod
    def parse(cls, name):
        """Match an operation name case-insensitively"""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise InvalidOperation(f"Unknown operation: {name!r}")
        try:
            return cls(name.strip().upper())
        except ValueError:
            raise InvalidOperation(f"Unknown operation: {name!r}") from None

    @classmethod
    def names(cls):
        return [op.value for op in cls]


@dataclass(frozen=True)
class BitResult:
    """One bit position: the input bits, the operation and the output bit"""
    bit_a: str
    bit_b: Optional[str]
    operation: Operation
    result: str

    def explain(self):
        if self.operation.is_unary:
            return f"{self.bit_a} NOT = {self.result}"
        return f"{self.bit_a} {self.operation.value} {self.bit_b} = {self.result}"


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of one evaluation.

    operand_a/operand_b keep the caller's original (unpadded) strings;
    bits has length width, and steps/explanations are ordered MSB first.
    """
    operation: Operation
    operand_a: str
    operand_b: Optional[str]
    width: int
    bits: str
    decimal: int
    steps: Tuple[BitResult, ...]

    @property
    def explanations(self):
        return tuple(step.explain() for step in self.steps)


def validate_binary(value, max_bits=MAX_BITS):
    """Return value unchanged if it is a valid binary string, else raise InvalidOperand"""
    if not isinstance(value, str):
        raise InvalidOperand(f"Binary operand must be a string, got {type(value).__name__}")
    if not value:
        raise InvalidOperand("Binary operand cannot be empty")
    if len(value) > max_bits:
        raise InvalidOperand(f"Binary operand {value!r} is longer than {max_bits} bits")
    for char in value:
        if char not in BITS:
            raise InvalidOperand(f"Binary operand {value!r} contains invalid character {char!r}")
    return value


def _check_bit(bit):
    if bit not in BITS:
        raise InvalidOperand(f"Invalid bit: {bit!r}")
    return bit == '1'


def compute_bit(bit_a, bit_b, operation):
    """Compute a single output bit; bit_b is ignored for NOT"""
    operation = Operation.parse(operation)
    a = _check_bit(bit_a)

    if operation is Operation.NOT:
        return '0' if a else '1'

    if bit_b is None:
        raise OperandArityMismatch(f"{operation.value} needs two bits")
    b = _check_bit(bit_b)

    if operation is Operation.AND:
        value = a and b
    elif operation is Operation.OR:
        value = a or b
    elif operation is Operation.XOR:
        value = a != b
    elif operation is Operation.NAND:
        value = not (a and b)
    elif operation is Operation.NOR:
        value = not (a or b)
    elif operation is Operation.XNOR:
        value = a == b
    else:
        raise InvalidOperation(f"Unhandled operation: {operation!r}")

    return '1' if value else '0'


def evaluate(operand_a, operand_b, operation, max_bits=MAX_BITS):
    """
    Apply operation to one or two binary strings.

    Both operands are left-padded with zeros to the longer length before
    the per-bit loop; the padding never leaks into operand_a/operand_b
    of the returned OperationResult.
    """
    operation = Operation.parse(operation)
    validate_binary(operand_a, max_bits)

    if operation.is_unary:
        if operand_b is not None:
            raise OperandArityMismatch("NOT takes exactly one operand")
    else:
        if operand_b is None:
            raise OperandArityMismatch(f"{operation.value} takes exactly two operands")
        validate_binary(operand_b, max_bits)

    width = max(len(operand_a), len(operand_b or operand_a))
    padded_a = operand_a.zfill(width)
    padded_b = operand_b.zfill(width) if operand_b is not None else None

    steps = []
    for i in range(width):
        bit_b = padded_b[i] if padded_b is not None else None
        result = compute_bit(padded_a[i], bit_b, operation)
        steps.append(BitResult(padded_a[i], bit_b, operation, result))

    bits = ''.join(step.result for step in steps)
    return OperationResult(
        operation=operation,
        operand_a=operand_a,
        operand_b=operand_b,
        width=width,
        bits=bits,
        decimal=int(bits, 2),
        steps=tuple(steps),
    )
