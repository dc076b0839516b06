"""Conversions between infix, postfix and prefix notation, and postfix evaluation.

Operands are single ASCII letters or digits.  Operator precedence, from
tightest to loosest, is ``^``, ``/``, ``*``, then ``+`` and ``-`` together.
All operators group to the left.
"""

from __future__ import annotations

from collections.abc import Callable

_PRECEDENCE = {"^": 3, "/": 2, "*": 1, "+": -1, "-": -1}
_LOWEST = -2


def _precedence(op: str) -> int:
    return _PRECEDENCE.get(op, _LOWEST)


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def postfix_to_infix(expression: str) -> str:
    """Turn a postfix expression into a fully parenthesised infix one."""
    stack: list[str] = []
    for ch in expression:
        if ch.isspace():
            continue
        if _is_operand(ch):
            stack.append(ch)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(f"({left}{ch}{right})")
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


def infix_to_postfix(expression: str) -> str:
    """Turn an infix expression into postfix notation."""
    output: list[str] = []
    operators: list[str] = []
    for ch in expression:
        if ch.isspace():
            continue
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            operators.append(ch)
        elif ch == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise ValueError("unbalanced parentheses")
            operators.pop()
        else:
            while (
                operators
                and operators[-1] != "("
                and _precedence(ch) <= _precedence(operators[-1])
            ):
                output.append(operators.pop())
            operators.append(ch)
    while operators:
        op = operators.pop()
        if op == "(":
            raise ValueError("unbalanced parentheses")
        output.append(op)
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Turn an infix expression into prefix notation."""
    operands: list[str] = []
    operators: list[str] = []

    def reduce() -> None:
        if len(operands) < 2:
            raise ValueError(f"operator {operators[-1]!r} lacks operands")
        right = operands.pop()
        left = operands.pop()
        operands.append(operators.pop() + left + right)

    for ch in expression:
        if ch.isspace():
            continue
        if ch == "(":
            operators.append(ch)
        elif ch == ")":
            while operators and operators[-1] != "(":
                reduce()
            if not operators:
                raise ValueError("unbalanced parentheses")
            operators.pop()
        elif _is_operand(ch):
            operands.append(ch)
        else:
            while (
                operators
                and operators[-1] != "("
                and _precedence(ch) <= _precedence(operators[-1])
            ):
                reduce()
            operators.append(ch)
    while operators:
        if operators[-1] == "(":
            raise ValueError("unbalanced parentheses")
        reduce()
    if len(operands) != 1:
        raise ValueError("malformed infix expression")
    return operands[0]


def _truncating_divide(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _truncating_divide,
    "^": lambda left, right: float(left) ** right,
}


def evaluate_postfix(expression: str) -> float:
    """Evaluate a postfix expression of single-digit operands.

    Operands are truncated to integers before each operation and division
    truncates toward zero.  Characters that are neither digits nor operators
    are skipped.
    """
    stack: list[float] = []
    for ch in expression:
        if ch in _OPERATIONS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            right = int(stack.pop())
            left = int(stack.pop())
            stack.append(float(_OPERATIONS[ch](left, right)))
        elif "0" <= ch <= "9":
            stack.append(float(ch))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]