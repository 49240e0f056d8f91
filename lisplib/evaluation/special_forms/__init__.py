"""Registry of special forms for the lisplib evaluator.

Special forms receive their operands unevaluated. The evaluator consults this
table, keyed by the operator's atom, before instruction dispatch.
"""

from lisplib.types.atom import Instruction, InstructionAtom, Key
from lisplib.evaluation.special_forms.define_form import define_form

SPECIAL_FORMS = {
    InstructionAtom(Instruction.DEFINE): define_form,
    Key("define"): define_form,
}
