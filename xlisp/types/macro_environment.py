from __future__ import annotations
from typing import Callable
from itertools import count

from xlisp import EvaluatorFn, SExpression
from xlisp.types.lambda_fn import Lambda
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector

_QUOTING_HEADS = (Symbol("quote"), Symbol("quasiquote"))


class MacroEnvironment:
    """
    Macro environment mapping macro names (Symbols) to Lambda transformers
    or Python callable transformer functions.

    - Head-position macro expansion
    - Recursive nested expansion (not inside quote/quasiquote)
    - gensym support
    """

    def __init__(self):
        self.macros: dict[Symbol, Lambda | Callable] = {}
        self._gensym_counter = count(1)

    def define_macro(self, name: Symbol, transformer: Lambda | Callable):
        self.macros[name] = transformer

    def is_macro(self, sym: SExpression) -> bool:
        return isinstance(sym, Symbol) and sym in self.macros

    def gen_sym(self, prefix: str = "G__") -> Symbol:
        return Symbol(f"{prefix}{next(self._gensym_counter)}")

    def _run_transformer(
        self,
        args: list[SExpression],
        transformer: Lambda,
        evaluator: EvaluatorFn,
    ) -> SExpression:
        """
        Bind the raw, unevaluated args to the transformer's formals, run its
        body once and return the expansion without evaluating it.
        """
        call_scope = transformer.extend_scope(list(args))
        expansion = None
        for form in transformer.body:
            expansion = evaluator(form, call_scope, self)
        return expansion

    # Single-step head expansion
    def expand_1(self, form: SExpression, evaluator: EvaluatorFn, scope) -> SExpression:
        """Expand only the head-position macro if present."""
        if isinstance(form, list) and not isinstance(form, Vector) and form:
            head = form[0]
            if self.is_macro(head):
                transformer = self.macros[head]
                if isinstance(transformer, Lambda):
                    return self._run_transformer(form[1:], transformer, evaluator)
                # Python transformers take (args, scope) and return a form
                return transformer(form[1:], scope)
        return form

    def expand(self, form: SExpression, evaluator: EvaluatorFn, scope) -> tuple[SExpression, bool]:
        """Expand the head to a fixpoint; also report whether anything changed."""
        cur = form
        expanded = False
        while True:
            nxt = self.expand_1(cur, evaluator, scope)
            if nxt is cur or nxt == cur:
                return cur, expanded
            cur = nxt
            expanded = True

    def macro_expand_head(self, form: SExpression, evaluator: EvaluatorFn, scope) -> SExpression:
        return self.expand(form, evaluator, scope)[0]

    # Full expansion
    def macro_expand_all(self, form: SExpression, evaluator: EvaluatorFn, scope) -> SExpression:
        expanded = self.macro_expand_head(form, evaluator, scope)

        if isinstance(expanded, Vector):
            return Vector(self.macro_expand_all(x, evaluator, scope) for x in expanded)
        if isinstance(expanded, list):
            if expanded and expanded[0] in _QUOTING_HEADS:
                return expanded
            return [self.macro_expand_all(x, evaluator, scope) for x in expanded]
        return expanded
