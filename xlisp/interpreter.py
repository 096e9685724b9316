from __future__ import annotations

import logging
from typing import Callable, Literal

from xlisp import SExpression, LispValue
from xlisp.builtin.env_builtin import register
from xlisp.config import BASE_NS, get_default_namespace, get_prelude_paths
from xlisp.evaluation.evaluator import evaluate
from xlisp.reader.parser import lex, TokenStream
from xlisp.types.environment import Environment
from xlisp.types.macro_environment import MacroEnvironment
from xlisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating xlisp code.
    Maintains an Environment and MacroEnvironment across calls.

    The core library is bound into the base namespace at construction; the
    prelude is evaluated there too, after which the interpreter switches to
    `namespace` (default from configuration).
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        namespace: str | None = None,
        eval_fn: Callable[[SExpression, Environment, MacroEnvironment], LispValue] | None = None,
    ):
        self.eval_fn = eval_fn or evaluate
        self.env: Environment = Environment(namespace=BASE_NS, check_ns=False)
        register(self.env)
        self.env.check_ns = True
        self.env.switch_namespace(BASE_NS)

        self.macros: MacroEnvironment = MacroEnvironment()

        if prelude is None:
            pass
        elif prelude == 'auto':
            for path in get_prelude_paths():
                if not path.exists():
                    logger.debug("Prelude %s not found, skipping", path)
                    continue
                self.eval_prelude(path.read_text(encoding='utf-8'))
        elif prelude:
            self.eval_prelude(prelude)

        self.env.switch_namespace(namespace or get_default_namespace())

    def read_eval(self, stream: TokenStream) -> list[LispValue]:
        """Evaluate every form remaining in `stream`, returning all results."""
        results: list[LispValue] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_fn(expr, self.env, self.macros))
        return results

    def eval_prelude(self, code: str) -> None:
        """Evaluate prelude code in the base namespace, discarding results."""
        previous = self.env.current_namespace
        self.env.switch_namespace(BASE_NS)
        try:
            self.read_eval(TokenStream(iter(lex(code))))
        finally:
            self.env.switch_namespace(previous)

    def eval(self, code: str) -> LispValue:
        results = self.read_eval(TokenStream(iter(lex(code))))
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
