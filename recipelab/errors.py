"""
Error classes for recipelab.

Two disjoint classes of failure exist:
- Setup errors: the registry is invalid, a step name cannot be resolved,
  an index is out of range, a persisted recipe is malformed. These are raised
  before any execution or emission happens.
- Controlled recipe abort: a step executor returning False. This is NOT an
  error and is never raised; the interpreter reports it through RunResult and
  the generated programs exit normally.
"""


class RecipeLabError(Exception):
    """Base exception for recipelab."""
    pass


class RegistryValidationError(RecipeLabError):
    """
    Raised when a step registry fails validation.

    A registry holding a schema without a name, describer, executor or
    emitter must not be used to assemble, run or emit a recipe.
    """
    pass


class StepNotFoundError(RecipeLabError):
    """Raised when a step name or index cannot be resolved in the registry."""
    pass


class RecipeIndexError(RecipeLabError, IndexError):
    """Raised when a recipe instance index is out of range."""
    pass


class RecipeFormatError(RecipeLabError):
    """Raised when a persisted recipe or a recipe definition is malformed."""
    pass


class ConfigError(RecipeLabError):
    """Configuration validation error."""
    pass
