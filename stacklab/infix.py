"""Infix to postfix conversion and postfix evaluation for a small calculator."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Sequence

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_OPERATORS = frozenset("+-*/^")
# A sign is read as part of a number when it follows one of these characters.
_SIGN_CONTEXT = frozenset("(*/+-")
_PRECEDENCE = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ExpressionError(ValueError):
    """Raised when an expression cannot be converted or evaluated."""


def precedence(op: str) -> int:
    """Return the binding strength of an operator, or -1 if it is unknown."""
    return _PRECEDENCE.get(op, -1)


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to postfix; every token is followed by a space."""
    tokens: list[str] = []
    operators: list[str] = []
    i = 0
    length = len(infix)
    while i < length:
        ch = infix[i]
        if ch in _SPACE:
            i += 1
            continue
        if ch in _DIGITS or (ch in "+-" and (i == 0 or infix[i - 1] in _SIGN_CONTEXT)):
            end = i + 1
            while end < length and (infix[end] in _DIGITS or infix[end] == "."):
                end += 1
            tokens.append(infix[i:end])
            i = end
            continue
        if ch == "(":
            operators.append(ch)
        elif ch == ")":
            while operators and operators[-1] != "(":
                tokens.append(operators.pop())
            if not operators:
                raise ExpressionError("mismatched parentheses")
            operators.pop()
        elif ch in _OPERATORS:
            while operators and precedence(operators[-1]) >= precedence(ch):
                tokens.append(operators.pop())
            operators.append(ch)
        else:
            raise ExpressionError(f"invalid character: {ch}")
        i += 1
    tokens.extend(reversed(operators))
    return "".join(f"{token} " for token in tokens)


def _parse_number(token: str) -> float:
    match = _NUMBER_PREFIX.match(token)
    return float(match.group()) if match else 0.0


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0 and b < 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


def _apply(op: str, a: float, b: float) -> float:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ExpressionError("division by zero")
        return a / b
    if op == "^":
        return _power(a, b)
    raise ExpressionError(f"unknown operator: {op}")


def evaluate_postfix(postfix: str) -> float:
    """Evaluate a space separated postfix expression."""
    operands: list[float] = []
    i = 0
    length = len(postfix)
    while i < length:
        ch = postfix[i]
        if ch in _SPACE:
            i += 1
            continue
        signed = ch in "+-" and i + 1 < length and postfix[i + 1] in _DIGITS
        if ch in _DIGITS or signed:
            end = i + 1
            while end < length and postfix[end] not in _SPACE:
                end += 1
            operands.append(_parse_number(postfix[i:end]))
            i = end
            continue
        if len(operands) < 2:
            raise ExpressionError("not enough operands")
        b = operands.pop()
        a = operands.pop()
        operands.append(_apply(ch, a, b))
        i += 1
    if len(operands) != 1:
        raise ExpressionError("malformed expression")
    return operands[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Convert and evaluate an expression given as arguments or read from input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        expression = " ".join(args)
    else:
        try:
            expression = input("Enter an expression (e.g. (3.5+4.2)*2): ")
        except EOFError:
            expression = ""
    try:
        postfix = infix_to_postfix(expression)
        print(f"Postfix: {postfix}")
        result = evaluate_postfix(postfix)
    except ExpressionError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Result: {result:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())