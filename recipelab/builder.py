"""
Recipe assembly - resolve step names against a registry into a Recipe.

Assembly is the only phase that mutates a Recipe. It refuses to start on an
invalid registry and aborts on the first name it cannot resolve, so nothing is
ever executed or emitted from a half-built recipe.

Recipe definitions may also be written in YAML:

    steps:
      - hello_world
      - print_number: {num: 42}
      - set_values: {cnt: 10}
      - check_data
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from recipelab.errors import RecipeFormatError, StepNotFoundError
from recipelab.recipe import Recipe
from recipelab.registry import StepRegistry
from recipelab.schemas import ConfigMap

logger = logging.getLogger(__name__)


class RecipeBuilder:
    """
    Builder for assembling a Recipe from step names.

    Usage:
        builder = RecipeBuilder(registry)
        builder.add("hello_world").add("set_values", {"cnt": 10})
        recipe = builder.build()
    """

    def __init__(self, registry: StepRegistry):
        """
        Initialize the builder.

        Args:
            registry: Registry used to resolve step names

        Raises:
            RegistryValidationError: If the registry is invalid
        """
        registry.require_valid()
        self._registry = registry
        self._recipe = Recipe()

    def add(self, name: str, config: Optional[dict[str, float]] = None) -> "RecipeBuilder":
        """
        Append a step by name and configure it.

        Args:
            name: Registered step name (first match wins)
            config: Optional parameters for the new instance

        Returns:
            The builder, for chaining

        Raises:
            StepNotFoundError: If no step has this name
        """
        step = self._registry.get(name)
        if step is None:
            raise StepNotFoundError(
                f"Unknown step: '{name}'. Registered: {self._registry.names()}"
            )

        index = self._recipe.add(step)
        for key, value in (config or {}).items():
            self._recipe.configure(index, key, value)
        return self

    def build(self) -> Recipe:
        """Return the assembled recipe."""
        logger.debug(f"Assembled recipe with {len(self._recipe)} steps")
        return self._recipe


def _parse_entry(entry: Any, position: int) -> tuple[str, dict[str, float]]:
    """
    Parse one recipe definition entry.

    Args:
        entry: Either a step name or a one-key mapping {name: {key: value}}
        position: Entry index, for error messages

    Returns:
        (name, config) tuple

    Raises:
        RecipeFormatError: If the entry has neither shape
    """
    if isinstance(entry, str):
        return entry, {}

    if isinstance(entry, dict) and len(entry) == 1:
        name, config = next(iter(entry.items()))
        if config is None:
            config = {}
        if not isinstance(name, str) or not isinstance(config, dict):
            raise RecipeFormatError(f"Step #{position}: expected {{name: {{key: value}}}}, got {entry!r}")
        try:
            ConfigMap(config)
        except (TypeError, ValueError) as e:
            raise RecipeFormatError(f"Step #{position} ({name}): {e}")
        return name, config

    raise RecipeFormatError(f"Step #{position}: expected a step name or a mapping, got {entry!r}")


def build_recipe(registry: StepRegistry, definition: list[Any]) -> Recipe:
    """
    Build a Recipe from a definition list.

    Args:
        registry: Registry used to resolve step names
        definition: Entries as accepted by the YAML format

    Returns:
        The assembled Recipe

    Raises:
        RegistryValidationError: If the registry is invalid
        StepNotFoundError: If a name cannot be resolved
        RecipeFormatError: If an entry is malformed
    """
    builder = RecipeBuilder(registry)
    for position, entry in enumerate(definition):
        name, config = _parse_entry(entry, position)
        builder.add(name, config)
    return builder.build()


def load_recipe_definition(path: Union[str, Path]) -> list[Any]:
    """
    Load a recipe definition list from a YAML file.

    Args:
        path: YAML file with a top-level ``steps`` list

    Returns:
        The list of step entries

    Raises:
        RecipeFormatError: If the file cannot be parsed or has no steps list
    """
    path = Path(path)
    if not path.exists():
        raise RecipeFormatError(f"Recipe definition not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RecipeFormatError(f"Invalid YAML syntax in {path}: {e}")

    if not isinstance(data, dict) or not isinstance(data.get("steps"), list):
        raise RecipeFormatError(f"{path}: expected a top-level 'steps' list")

    return data["steps"]
