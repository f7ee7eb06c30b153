from schemey import SExpression
from schemey.errors import BadSpecialForm


def unrecognised(form: SExpression) -> BadSpecialForm:
    """Error for a keyword form whose shape matches no rule."""
    return BadSpecialForm("Unrecognised special form", form)
