from xlisp.types.symbol import Symbol, QualifiedSymbol, split_symbol
from xlisp.types.nil import Nil
from xlisp.types.vector import Vector
from xlisp.types.scope import Scope
from xlisp.types.environment import Environment
from xlisp.types.lambda_fn import Lambda
from xlisp.types.special_form import SpecialForm
from xlisp.types.recur import RecurSignal
from xlisp.types.atom import Atom
from xlisp.types.future import FutureHandle
from xlisp.types.macro_environment import MacroEnvironment
