"""
recipelab.schemas - Core data structures for recipes.

ConfigMap -> StepSchema -> StepInstance -> Recipe

- ConfigMap: per-instance float parameters, iterated in key order
- StepSchema: name + describer + executor + emitter, owned by the registry
- StepInfo / CodeInfo: metadata records produced by describers and emitters
"""

from .config_map import ConfigMap, to_float32
from .step import (
    CodeInfo,
    CodeLines,
    StepInfo,
    StepSchema,
    default_info,
    same_code_info,
)

__all__ = [
    "ConfigMap",
    "to_float32",
    "CodeInfo",
    "CodeLines",
    "StepInfo",
    "StepSchema",
    "default_info",
    "same_code_info",
]
