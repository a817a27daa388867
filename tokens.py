"""Token and operator model shared by the lexer and the shunting-yard converter.

A token is a `(kind, value)` pair; the kind is one of a closed set of tags, so
consumers dispatch on `token.kind` rather than on classes.
"""
from typing import Literal, NamedTuple, Union


class Op(NamedTuple):
    symbol: str
    arity: Literal["unary", "binary"]
    assoc: Literal["l", "r"]  # left-associative, right-associative
    prec: int

    def __repr__(self):
        return f"op({self.symbol!r}, {self.arity})"

    def __str__(self):
        # Unary minus and plus would be ambiguous next to their binary twins.
        if self.arity == "unary":
            return {"-": "m", "+": "p"}.get(self.symbol, self.symbol)
        return self.symbol

    def pops_before(self, incoming):
        """Whether `self`, on top of the stack, is emitted ahead of `incoming`.

        >>> BINARY_OPS["*"].pops_before(BINARY_OPS["+"])
        True
        >>> BINARY_OPS["^"].pops_before(BINARY_OPS["^"])
        True
        >>> UNARY_OPS["-"].pops_before(UNARY_OPS["+"])
        False
        """
        return self.prec > incoming.prec or self.prec == incoming.prec and self.assoc == "l"


OP_TABLE = """
unary  r 8 - +
binary l 7 * /
binary l 6 ^
binary l 5 - +
binary l 4 < > = #
unary  r 3 ~
binary l 2 & !
""".strip()


def _ops(arity):
    return {
        symbol: Op(symbol, arity, assoc, int(prec))
        for kind, assoc, prec, *symbols in map(str.split, OP_TABLE.split("\n"))
        if kind == arity
        for symbol in symbols
    }


BINARY_OPS = _ops("binary")
UNARY_OPS = _ops("unary")

Kind = Literal["num", "real", "bool", "op", "(", ")", "fun"]


class Token(NamedTuple):
    kind: Kind
    value: Union[int, str, Op, None] = None

    @classmethod
    def number(cls, n):
        assert n >= 0, "signs are separate unary operator tokens"
        return cls("num", n)

    @classmethod
    def real(cls, name):
        return cls("real", name)

    @classmethod
    def boolean(cls, name):
        return cls("bool", name)

    @classmethod
    def operator(cls, op):
        return cls("op", op)

    @classmethod
    def function(cls, name):
        return cls("fun", name)

    def is_operand(self):
        return self.kind in ("num", "real", "bool")

    def is_operator(self):
        return self.kind == "op"

    def is_bracket(self):
        return self.kind in ("(", ")")

    def __repr__(self):
        if self.is_bracket():
            return {"(": "LEFT", ")": "RIGHT"}[self.kind]
        if self.is_operator():
            return repr(self.value)
        return f"{self.kind}({self.value!r})"

    def __str__(self):
        if self.is_bracket():
            return {"(": "[", ")": "]"}[self.kind]
        return str(self.value)


LEFT = Token("(")
RIGHT = Token(")")


def render(tokens):
    """Space-join the display form of `tokens`.

    >>> render([Token.number(1), Token.operator(UNARY_OPS["-"]), Token.real("R2"),
    ...         Token.operator(BINARY_OPS["-"])])
    '1 m R2 -'
    """
    return " ".join(map(str, tokens))
