"""
recipelab - step recipes with three projections

A recipe is an ordered list of configured steps drawn from a registry.
The same recipe can be interpreted directly, emitted as one flat Python
script, or emitted as a library of step functions plus a driver.
"""

__version__ = "0.1.0"


__all__ = [
    "StepRegistry",
    "Recipe",
    "RecipeBuilder",
    "run",
    "RunResult",
    "LabConfig",
    "load_config",
]

from .builder import RecipeBuilder
from .config import LabConfig, load_config
from .executor import RunResult, run
from .recipe import Recipe
from .registry import StepRegistry
