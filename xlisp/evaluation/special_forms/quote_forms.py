from xlisp import SExpression, LispValue, EvaluatorFn
from xlisp.errors import XlispArityError, XlispTypeError, XlispError
from xlisp.types.symbol import Symbol
from xlisp.types.vector import Vector

QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")


def eval_quasiquote(
    evaluate_fn: EvaluatorFn,
    expr: SExpression,
    scope,
    macros,
    depth: int = 1,
) -> SExpression:
    """Build the quasiquoted structure, evaluating unquotes at depth 1."""

    def _process_list_part(seq):
        result_list = []
        for item in seq:
            if isinstance(item, list) and not isinstance(item, Vector) and item:
                head, *itail = item
                if head == QUASIQUOTE:
                    result_list.append(
                        [QUASIQUOTE, eval_quasiquote(evaluate_fn, itail[0], scope, macros, depth + 1)]
                    )
                    continue
                if head == UNQUOTE and depth == 1:
                    result_list.append(evaluate_fn(itail[0], scope, macros))
                    continue
                if head == UNQUOTE_SPLICING and depth == 1:
                    if not itail:
                        continue
                    spliced_val = evaluate_fn(itail[0], scope, macros)
                    if not isinstance(spliced_val, list):
                        raise XlispTypeError("unquote-splicing must produce a list")
                    result_list.extend(spliced_val)
                    continue
            result_list.append(eval_quasiquote(evaluate_fn, item, scope, macros, depth))
        return result_list

    if not isinstance(expr, list):
        return expr
    if not expr:
        return type(expr)()
    if not isinstance(expr, Vector) and expr[0] == UNQUOTE and depth == 1:
        return evaluate_fn(expr[1], scope, macros)

    result = _process_list_part(expr)
    return Vector(result) if isinstance(expr, Vector) else result


def quote_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise XlispArityError("quote expects exactly 1 argument")
    return tail[0]


def quasiquote_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise XlispArityError("quasiquote expects exactly 1 argument")
    return eval_quasiquote(evaluate_fn, tail[0], scope, macros)


def unquote_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    raise XlispError("unquote not valid outside of quasiquote")


def unquote_splice_form(tail: list[SExpression], scope, macros, evaluate_fn: EvaluatorFn) -> LispValue:
    raise XlispError("unquote-splicing not valid outside of quasiquote")
