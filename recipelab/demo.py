"""
The shipped example recipe.

    hello_world, print_number(42), set_values(0), set_values(10), check_data,
    sum, print, check(ref=45), reset, set_values(20), check_data, print_data,
    product, print
"""

from recipelab import steps
from recipelab.builder import RecipeBuilder
from recipelab.recipe import Recipe
from recipelab.registry import StepRegistry
from recipelab.steps import conf


def default_registry() -> StepRegistry:
    """A registry holding the example step catalog."""
    return steps.register_default_steps(StepRegistry())


def build_demo_recipe(registry: StepRegistry) -> Recipe:
    """
    Assemble the example recipe.

    Raises:
        RegistryValidationError: If the registry is invalid
        StepNotFoundError: If an example step is not registered
    """
    return (
        RecipeBuilder(registry)
        .add(steps.HELLO_WORLD)
        .add(steps.PRINT_NUMBER, {conf.PRINT_NUMBER_NUM: 42.0})
        .add(steps.SET_VALUES, {conf.SET_VALUES_CNT: 0})
        .add(steps.SET_VALUES, {conf.SET_VALUES_CNT: 10})
        .add(steps.CHECK_DATA)
        .add(steps.SUM)
        .add(steps.PRINT)
        .add(steps.CHECK, {conf.CHECK_REF: 45.0})
        .add(steps.RESET)
        .add(steps.SET_VALUES, {conf.SET_VALUES_CNT: 20})
        .add(steps.CHECK_DATA)
        .add(steps.PRINT_DATA)
        .add(steps.PRODUCT)
        .add(steps.PRINT)
        .build()
    )
