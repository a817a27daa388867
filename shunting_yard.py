"""Reorder infix tokens into postfix (reverse polish) order.

This is Dijkstra's shunting-yard algorithm over the tokens produced by
`lexer.lex`. Operands go straight to the output; operators, functions and
left brackets wait on a stack until precedence, associativity or a closing
bracket releases them.

By default bracket nesting is not checked: a stray `)` simply drains the
stack and a stray `(` ends up in the output. Pass `strict=True` to get a
`ConversionError` instead.

Note that `^` is left-associative here, so `2 ^ 3 ^ 2` is `(2 ^ 3) ^ 2`.
"""
import os
import sys

from lexer import LexError, lex
from tokens import render

DEBUG = bool(os.getenv("DEBUG", False))


class ConversionError(ValueError):
    pass


def _trace_row(output, stack, token):
    cells = (
        "".join(f" {t}" for t in output),
        "".join(f" {t}" for t in stack),
        token,
    )
    return "{:30}{:30}{:10}".format(*map(str, cells))


def to_postfix(tokens, debug=DEBUG, sink=print, strict=False):
    """Return `tokens` (an infix token sequence) in postfix order.

    With `debug`, one line per consumed token showing the output so far, the
    operator stack and the token itself is passed to `sink`.

    >>> render(to_postfix(lex("1 + 2 * R3")))
    '1 2 R3 * +'
    >>> render(to_postfix(lex("- [1 + 2]")))
    '1 2 + m'
    """
    stack = []  # operators, functions and left brackets
    output = []
    if debug:
        sink("{:30}{:30}{:10}".format("output", "stack", "token"))
    for token in tokens:
        if debug:
            sink(_trace_row(output, stack, token))
        kind = token.kind
        if kind in ("num", "real", "bool"):
            output.append(token)
        elif kind in ("(", "fun"):
            stack.append(token)
        elif kind == "op":
            op = token.value
            # A prefix operator has no left operand yet, so nothing can be
            # due for output ahead of it.
            if op.arity == "binary":
                while stack and stack[-1].kind != "(":
                    top = stack[-1]
                    if top.kind == "fun" or top.value.pops_before(op):
                        output.append(stack.pop())
                    else:
                        break
            stack.append(token)
        elif kind == ")":
            while stack and stack[-1].kind != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
            elif strict:
                raise ConversionError(f"Unmatched closing bracket after: {render(output)}")
        else:
            raise ValueError(f"Unknown token kind {kind!r} in {token!r}")
    while stack:
        token = stack.pop()
        if strict and token.kind == "(":
            raise ConversionError(f"Unmatched opening bracket after: {render(output)}")
        output.append(token)
    return output


def infix_to_postfix(text, **kwargs):
    """Lex `text` and convert it; keyword arguments go to `to_postfix`.

    >>> render(infix_to_postfix("~ B1 & B2 < 3"))
    'B1 ~ B2 3 < &'
    """
    return to_postfix(lex(text), **kwargs)


if __name__ == "__main__":
    expr = " ".join(sys.argv[1:]) or "3 + 4 * 2 / ( 1 - 5 ) ^ 6 ^ 7"
    try:
        rpn = infix_to_postfix(expr, debug=True)
    except LexError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    print("--------------------------")
    print("input:", expr)
    print("output:", render(rpn))
