from __future__ import annotations

from xlisp import SExpression
from xlisp.types.lambda_fn import Lambda
from xlisp.types.symbol import Symbol


def _subst(expr: SExpression, bindings: dict[Symbol, SExpression]) -> SExpression:
    """Shallow syntactic substitution over lists and Symbols."""
    if isinstance(expr, Symbol):
        return bindings.get(expr, expr)
    if isinstance(expr, list):
        return [_subst(x, bindings) for x in expr]
    return expr


class ReaderMacros:
    """
    Registry of reader macros as Lambdas.
    Maps prefix characters (like ' and `) to a template that wraps the next
    parsed expression(s).
    """

    def __init__(self):
        self.macros: dict[str, Lambda] = {}

    def define(self, char: str, fn: Lambda) -> None:
        self.macros[char] = fn

    def is_macro(self, char: str) -> bool:
        return char in self.macros

    def dispatch(self, char: str, stream: "TokenStream") -> SExpression:
        """Parse one expression per declared formal and substitute into the body."""
        if char not in self.macros:
            raise ValueError(f"No reader macro defined for {char!r}")

        lam = self.macros[char]
        args: list[SExpression] = [stream.parse_expr() for _ in lam.formals]
        bindings = {param: arg for param, arg in zip(lam.formals, args)}
        return _subst(lam.body[0], bindings)


reader_macros: ReaderMacros = ReaderMacros()

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    ",": Symbol("unquote"),
    ",@": Symbol("unquote-splicing"),
}

for key, name in QUOTE_FORMS.items():
    x = Symbol("x")
    reader_macros.define(key, Lambda([x], [[name, x]], None))
