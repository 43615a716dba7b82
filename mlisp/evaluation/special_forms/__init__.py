"""Registry of special forms for the mlisp evaluator.

Maps head symbol names to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary
function application, so these names cannot be shadowed by `define`.
"""

from mlisp.evaluation.special_forms.if_form import if_form
from mlisp.evaluation.special_forms.define_form import define_form
from mlisp.evaluation.special_forms.lambda_form import lambda_form
from mlisp.evaluation.special_forms.fn_form import fn_form

SPECIAL_FORMS = {
    "if": if_form,
    "define": define_form,
    "lambda": lambda_form,
    "fn": fn_form,
}
