"""
recipelab.codegen - source projections of a recipe.

- InlineCodeGenerator: one flat script reproducing the interpreter
- FunctionCodeGenerator: deduplicated step functions plus a driver
"""

from .base import DomainCode, function_name
from .functions import FunctionCodeGenerator, GeneratedFunctions, create_code_func
from .inline import InlineCodeGenerator, create_code

__all__ = [
    "DomainCode",
    "function_name",
    "FunctionCodeGenerator",
    "GeneratedFunctions",
    "create_code_func",
    "InlineCodeGenerator",
    "create_code",
]
