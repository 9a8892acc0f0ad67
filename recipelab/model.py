"""
Example domain model: a numeric buffer and an accumulator.

Model is the state the example steps mutate when a recipe is interpreted.
DOMAIN_CODE is its counterpart in generated programs, where the same state
is a SimpleNamespace with the same two attributes.
"""

from dataclasses import dataclass, field

from recipelab.codegen import DomainCode


@dataclass
class Model:
    """
    Domain state threaded through every step executor.

    Attributes:
        data: Numeric buffer
        res: Accumulator written by sum/product, read by print/check
    """
    data: list[float] = field(default_factory=list)
    res: float = 0.0

    def cleanup(self) -> None:
        """Release the buffer. Called by the caller after run(), not by run()."""
        self.data.clear()


DOMAIN_CODE = DomainCode(
    setup=("model = SimpleNamespace(data=[], res=0.0)",),
    cleanup=("model.data.clear()",),
    imports=("import math", "from types import SimpleNamespace"),
    state="model",
)
