"""Registry of special forms for the Schemey evaluator.

Maps keyword Symbols to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary procedure
application; a keyword in operator position is always treated as syntax.
"""

from schemey.types.symbol import Symbol
from schemey.evaluation.special_forms.if_form import if_form
from schemey.evaluation.special_forms.quote_form import quote_form
from schemey.evaluation.special_forms.set_form import set_form
from schemey.evaluation.special_forms.define_form import define_form
from schemey.evaluation.special_forms.lambda_form import lambda_form
from schemey.evaluation.special_forms.load_form import load_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("quote"): quote_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("load"): load_form,
}
