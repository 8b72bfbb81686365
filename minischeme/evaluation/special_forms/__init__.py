"""Registry of special forms for the minischeme evaluator.

Special forms are ordinary values bound in the global environment, so they
can be shadowed or redefined like any other symbol. The evaluator recognises
them by their type, not by name; this table only supplies the initial
bindings installed by `minischeme.builtin.env_builtin.register`.
"""

from minischeme.types.procedure import SpecialForm
from minischeme.types.symbol import Symbol
from minischeme.evaluation.special_forms.if_form import if_form
from minischeme.evaluation.special_forms.define_form import define_form
from minischeme.evaluation.special_forms.let_form import let_form
from minischeme.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("if"): SpecialForm("if", if_form),
    Symbol("define"): SpecialForm("define", define_form),
    Symbol("let"): SpecialForm("let", let_form),
    Symbol("lambda"): SpecialForm("lambda", lambda_form),
}
