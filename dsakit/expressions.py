"""Conversions between infix, postfix and prefix arithmetic notation.

Operands are single characters; the operators are ``+ - * / ^``.
"""

from __future__ import annotations

OPERATORS = "+-*/^"

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def precedence(operator: str) -> int:
    """Binding strength of ``operator``; 0 for anything that is not one."""
    return _PRECEDENCE.get(operator, 0)


def _drain(stack: list[str], output: list[str]) -> None:
    """Move operators to the output until the stack is empty or a '(' is on top."""
    while stack and stack[-1] != "(":
        output.append(stack.pop())


def _close_bracket(stack: list[str], output: list[str]) -> None:
    # A closing bracket empties the whole stack, not just up to its '('.
    while stack:
        top = stack.pop()
        if top != "(":
            output.append(top)


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to postfix; '^' is right-associative."""
    output: list[str] = []
    stack: list[str] = []
    for ch in infix:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            _close_bracket(stack, output)
        elif ch in OPERATORS:
            if (
                not stack
                or precedence(ch) > precedence(stack[-1])
                or (ch == "^" and precedence(ch) == precedence(stack[-1]))
            ):
                stack.append(ch)
            else:
                while (
                    stack
                    and precedence(ch) <= precedence(stack[-1])
                    and stack[-1] != "("
                ):
                    output.append(stack.pop())
                stack.append(ch)
        else:
            output.append(ch)
    _drain(stack, output)
    return "".join(output)


def _mirror(infix: str) -> str:
    """Swap each '(' with the next ')' after it, then reverse the text."""
    chars = list(infix)
    for i in range(len(chars)):
        if chars[i] != "(":
            continue
        try:
            j = chars.index(")", i + 1)
        except ValueError:
            continue
        chars[i], chars[j] = chars[j], chars[i]
    return "".join(reversed(chars))


def _prefix_of_mirrored(expression: str) -> str:
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            _close_bracket(stack, output)
        elif ch in OPERATORS:
            if not stack or precedence(ch) > precedence(stack[-1]):
                stack.append(ch)
            elif precedence(ch) == precedence(stack[-1]):
                if ch == "^":
                    while stack and precedence(ch) == precedence(stack[-1]):
                        output.append(stack.pop())
                stack.append(ch)
            else:
                while (
                    stack
                    and precedence(ch) <= precedence(stack[-1])
                    and stack[-1] != "("
                ):
                    output.append(stack.pop())
                stack.append(ch)
        else:
            output.append(ch)
    _drain(stack, output)
    return "".join(reversed(output))


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix notation."""
    return _prefix_of_mirrored(_mirror(infix))


def postfix_to_infix(postfix: str) -> str:
    """Convert postfix to fully parenthesised infix.

    Raises ValueError when an operator lacks operands or the input is empty.
    """
    stack: list[str] = []
    for ch in postfix:
        if ch in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(f"({left}{ch}{right})")
        else:
            stack.append(ch)
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def prefix_to_infix(prefix: str) -> str:
    """Convert prefix to fully parenthesised infix.

    Raises ValueError when an operator lacks operands or the input is empty.
    """
    stack: list[str] = []
    for ch in reversed(prefix):
        if ch in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            left = stack.pop()
            right = stack.pop()
            stack.append(f"({left}{ch}{right})")
        else:
            stack.append(ch)
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]