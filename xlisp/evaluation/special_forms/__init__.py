"""Registry of special forms for the xlisp evaluator.

Maps names to handlers that receive their argument forms unevaluated. At
startup each handler is wrapped in a SpecialForm and bound in the `core`
namespace, so the evaluator finds them by ordinary symbol resolution.
"""

from xlisp.evaluation.special_forms.quote_forms import (
    quote_form, quasiquote_form, unquote_form, unquote_splice_form,
)
from xlisp.evaluation.special_forms.do_form import do_form
from xlisp.evaluation.special_forms.def_form import def_form
from xlisp.evaluation.special_forms.if_form import if_form
from xlisp.evaluation.special_forms.fn_form import fn_form
from xlisp.evaluation.special_forms.let_form import let_form
from xlisp.evaluation.special_forms.defmacro_form import defmacro_form
from xlisp.evaluation.special_forms.macroexpand_forms import macroexpand_form, macroexpand1_form
from xlisp.evaluation.special_forms.eval_form import eval_form
from xlisp.evaluation.special_forms.ns_form import ns_form
from xlisp.evaluation.special_forms.loop_forms import loop_form, recur_form
from xlisp.evaluation.special_forms.thread_forms import thread_first_form, thread_last_form
from xlisp.evaluation.special_forms.case_form import case_form
from xlisp.evaluation.special_forms.future_forms import future_form, deref_form
from xlisp.evaluation.special_forms.atom_forms import swap_form
from xlisp.evaluation.special_forms.do_loop_forms import doseq_form, time_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "quasiquote": quasiquote_form,
    "unquote": unquote_form,
    "unquote-splicing": unquote_splice_form,
    "do": do_form,
    "def": def_form,
    "if": if_form,
    "fn": fn_form,
    "let": let_form,
    "defmacro": defmacro_form,
    "macroexpand-1": macroexpand1_form,
    "macroexpand": macroexpand_form,
    "eval": eval_form,
    "ns": ns_form,
    "loop": loop_form,
    "recur": recur_form,
    "->": thread_first_form,
    "->>": thread_last_form,
    "case": case_form,
    "future": future_form,
    "deref": deref_form,
    "swap!": swap_form,
    "doseq": doseq_form,
    "time": time_form,
}
