"""Bracket matching, infix to postfix conversion and postfix evaluation."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}

# Precedence of a symbol arriving from the input and of one sitting on the stack.
# Arriving '^' outranks a stacked '^', which makes it right-associative.
_OUT_PRECEDENCE = {"+": 1, "-": 1, "*": 3, "/": 3, "^": 6, "(": 7, ")": 0}
_IN_PRECEDENCE = {"+": 2, "-": 2, "*": 4, "/": 4, "^": 5, "(": 0}


def is_balanced(expression: str) -> bool:
    """Return True if every (, [ and { is closed by its partner in the right order."""
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def infix_to_postfix(expression: str) -> str:
    """Convert an expression over + - * / to postfix; any other character is an operand."""
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char not in _PRECEDENCE:
            output.append(char)
            continue
        while stack and _PRECEDENCE[char] <= _PRECEDENCE[stack[-1]]:
            output.append(stack.pop())
        stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_postfix_associative(expression: str) -> str:
    """Convert to postfix with parentheses and a right-associative ``^``.

    Raises ValueError on unmatched parentheses.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char not in _OUT_PRECEDENCE:
            output.append(char)
            continue
        while True:
            if not stack:
                if char == ")":
                    raise ValueError("unmatched ')'")
                stack.append(char)
                break
            top = stack[-1]
            if _OUT_PRECEDENCE[char] > _IN_PRECEDENCE[top]:
                stack.append(char)
                break
            if _OUT_PRECEDENCE[char] == _IN_PRECEDENCE[top]:
                stack.pop()
                break
            output.append(stack.pop())
    while stack:
        op = stack.pop()
        if op == "(":
            raise ValueError("unmatched '('")
        output.append(op)
    return "".join(output)


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands and + - * /.

    Division truncates toward zero. Raises ValueError on a malformed expression.
    """
    stack: list[int] = []
    for char in expression:
        if char in _PRECEDENCE:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            if char == "+":
                stack.append(left + right)
            elif char == "-":
                stack.append(left - right)
            elif char == "*":
                stack.append(left * right)
            else:
                stack.append(_truncating_divide(left, right))
        elif char.isdigit() and char.isascii():
            stack.append(int(char))
        else:
            raise ValueError(f"unexpected character {char!r}")
    if len(stack) != 1:
        raise ValueError("expression does not reduce to a single value")
    return stack[0]