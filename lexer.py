"""Turn infix expression text into a flat list of `Token`s.

Whether a `+` or `-` is a sign or an infix operator depends only on what came
before it: after an operand or a closing bracket it is binary, anywhere else
it is unary.
"""
import re

from tokens import BINARY_OPS, LEFT, RIGHT, UNARY_OPS, Token

# Alternatives are tried in order; `bad` catches whatever nothing else claims.
token_rex = re.compile(
    r"""
    (?P<space>\s+)
    | (?P<num>[0-9]+)
    | (?P<real>R[A-Za-z0-9]*)
    | (?P<bool>B[A-Za-z0-9]*)
    | (?P<sign>[-+])
    | (?P<op>[*/^<>=#~&!])
    | (?P<left>[\[(])
    | (?P<right>[\])])
    | (?P<bad>.)
    """,
    re.VERBOSE | re.DOTALL,
)


class LexError(ValueError):
    """An input character that starts no token."""

    def __init__(self, char, pos, text=None):
        self.char = char
        self.pos = pos
        self.text = text
        msg = f"Unexpected character {char!r} at offset {pos}"
        if text is not None:
            msg += f" in {text!r}"
        super().__init__(msg)


def lex(text):
    """Return the tokens of `text`, raising `LexError` on the first bad character.

    >>> lex("R1 + -2")
    [real('R1'), op('+', binary), op('-', unary), num(2)]
    """
    tokens = []
    operand_seen = False
    for m in token_rex.finditer(text):
        kind, s = m.lastgroup, m.group()
        if kind == "space":
            continue
        if kind == "num":
            tok = Token.number(int(s))
        elif kind == "real":
            tok = Token.real(s)
        elif kind == "bool":
            tok = Token.boolean(s)
        elif kind == "sign":
            tok = Token.operator((BINARY_OPS if operand_seen else UNARY_OPS)[s])
        elif kind == "op":
            tok = Token.operator(BINARY_OPS.get(s) or UNARY_OPS[s])
        elif kind == "left":
            tok = LEFT
        elif kind == "right":
            tok = RIGHT
        else:
            raise LexError(s, m.start(), text)
        operand_seen = kind in ("num", "real", "bool", "right")
        tokens.append(tok)
    return tokens
