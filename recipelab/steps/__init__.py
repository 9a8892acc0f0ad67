"""
recipelab.steps - the example step catalog.

Every step comes as an executor and an emitter that produce the same effect,
one at run time and one as generated source. register_default_steps() adds
the whole catalog to a registry.
"""

from recipelab.registry import StepRegistry
from recipelab.schemas import StepSchema, default_info, same_code_info

from . import conf
from .checks import (
    check_data,
    check_data_code,
    check_data_info,
    check_value,
    check_value_code,
    check_value_info,
)
from .output import (
    hello_world,
    hello_world_code,
    print_data,
    print_data_code,
    print_number,
    print_number_code,
    print_value,
    print_value_code,
)
from .values import (
    calculate_product,
    calculate_product_code,
    calculate_sum,
    calculate_sum_code,
    clear_values,
    clear_values_code,
    set_values,
    set_values_code,
)

# Step names
PRINT_NUMBER = "print_number"
HELLO_WORLD = "hello_world"
SET_VALUES = "set_values"
SUM = "sum"
PRODUCT = "product"
PRINT = "print"
PRINT_DATA = "print_data"
RESET = "reset"
CHECK = "check"
CHECK_DATA = "check_data"


def default_steps() -> list[StepSchema]:
    """Build the example step schemas, in registration order."""
    return [
        StepSchema(PRINT_NUMBER, default_info, print_number, print_number_code),
        StepSchema(HELLO_WORLD, same_code_info, hello_world, hello_world_code),
        StepSchema(SET_VALUES, default_info, set_values, set_values_code),
        StepSchema(SUM, same_code_info, calculate_sum, calculate_sum_code),
        StepSchema(PRODUCT, same_code_info, calculate_product, calculate_product_code),
        StepSchema(PRINT, same_code_info, print_value, print_value_code),
        StepSchema(PRINT_DATA, same_code_info, print_data, print_data_code),
        StepSchema(RESET, same_code_info, clear_values, clear_values_code),
        StepSchema(CHECK, check_value_info, check_value, check_value_code),
        StepSchema(CHECK_DATA, check_data_info, check_data, check_data_code),
    ]


def register_default_steps(registry: StepRegistry) -> StepRegistry:
    """
    Register the example catalog.

    Args:
        registry: Registry to extend

    Returns:
        The same registry, for chaining
    """
    for step in default_steps():
        registry.register(step)
    return registry


__all__ = [
    "conf",
    "default_steps",
    "register_default_steps",
    "PRINT_NUMBER",
    "HELLO_WORLD",
    "SET_VALUES",
    "SUM",
    "PRODUCT",
    "PRINT",
    "PRINT_DATA",
    "RESET",
    "CHECK",
    "CHECK_DATA",
]
