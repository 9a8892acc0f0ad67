"""
Recipe - an ordered list of configured step instances.

A Recipe is built in a single assembly phase (add + configure) and is then
consumed read-only by the interpreter and both code generators. It can be
persisted to text at any time without side effects.

Persisted text format, one instance after the other:

    set_values
    -->cnt:10.000000
    check_data
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Iterator, Optional, Union

from recipelab.errors import RecipeFormatError, RecipeIndexError, StepNotFoundError
from recipelab.schemas import CodeInfo, CodeLines, ConfigMap, StepInfo, StepSchema

logger = logging.getLogger(__name__)

# Prefix of a ConfigMap entry line in the persisted format
CONFIG_PREFIX = "-->"


def format_value(value: float) -> str:
    """Render a config value as a six-decimal string (e.g. 42.000000)."""
    return f"{value:.6f}"


@dataclass
class StepInstance:
    """
    A step schema bound to its per-use configuration.

    Attributes:
        step: The schema (a reference into the registry, never copied)
        config: Parameters for this use of the step
    """
    step: StepSchema
    config: ConfigMap = field(default_factory=ConfigMap)

    @property
    def name(self) -> str:
        return self.step.name

    def info(self) -> StepInfo:
        """Describe the underlying schema."""
        return self.step.describe()

    def execute(self, model: Any) -> bool:
        """Run the step against the model; False requests a stop."""
        return bool(self.step.execute(self.config, model))

    def make_code(self) -> tuple[CodeLines, CodeInfo]:
        """Emit the source lines for this configuration."""
        lines, info = self.step.emit(self.config)
        return list(lines), info

    def set_config(self, key: str, value: float) -> None:
        self.config.set(key, value)


class Recipe:
    """
    Ordered sequence of StepInstances. Order is execution order.

    Usage:
        recipe = Recipe()
        index = recipe.add(registry.get("set_values"))
        recipe.configure(index, "cnt", 10)
        recipe.persist("test.recipe")
    """

    def __init__(self) -> None:
        self._steps: list[StepInstance] = []

    def add(self, step: StepSchema) -> int:
        """
        Append a new instance with an empty configuration.

        Args:
            step: Schema to instantiate

        Returns:
            Index of the new instance
        """
        self._steps.append(StepInstance(step=step))
        return len(self._steps) - 1

    def configure(self, index: int, key: str, value: float) -> None:
        """
        Set one configuration entry on the instance at ``index``.

        Args:
            index: Instance index as returned by add()
            key: Parameter name
            value: Parameter value

        Raises:
            RecipeIndexError: If index is out of range
        """
        instance = self.get(index)
        if instance is None:
            raise RecipeIndexError(
                f"Recipe index {index} out of range (recipe has {len(self._steps)} steps)"
            )
        instance.set_config(key, value)

    def get(self, index: int) -> Optional[StepInstance]:
        """Get the instance at ``index``, or None if out of range."""
        if 0 <= index < len(self._steps):
            return self._steps[index]
        return None

    def all(self) -> tuple[StepInstance, ...]:
        """All instances in execution order."""
        return tuple(self._steps)

    def count(self) -> int:
        return len(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[StepInstance]:
        return iter(self._steps)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """Render the recipe in the persisted text format."""
        lines = []
        for s in self._steps:
            lines.append(s.name)
            for key, value in s.config.items():
                lines.append(f"{CONFIG_PREFIX}{key}:{format_value(value)}")
        return "".join(f"{line}\n" for line in lines)

    def persist(self, destination: Union[str, Path, IO[str]]) -> None:
        """
        Write the recipe to a file path or an open text stream.

        Args:
            destination: Path to write (overwritten) or a writable text stream
        """
        text = self.render()
        if hasattr(destination, "write"):
            destination.write(text)
            return

        path = Path(destination)
        with open(path, "w") as f:
            f.write(text)
        logger.info(f"Stored recipe ({len(self._steps)} steps) to {path}")

    @classmethod
    def load(cls, source: Union[str, Path, IO[str]], registry) -> "Recipe":
        """
        Read a persisted recipe back, resolving names against a registry.

        Args:
            source: Path to read or a readable text stream
            registry: StepRegistry used to resolve step names

        Returns:
            The reconstructed Recipe

        Raises:
            RegistryValidationError: If the registry holds an invalid schema
            StepNotFoundError: If a step name is not registered
            RecipeFormatError: If a config line is malformed or precedes any step
        """
        registry.require_valid()

        if hasattr(source, "read"):
            text = source.read()
        else:
            with open(source) as f:
                text = f.read()

        recipe = cls()
        index = None
        for lineno, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line:
                continue

            if line.startswith(CONFIG_PREFIX):
                if index is None:
                    raise RecipeFormatError(f"Line {lineno}: config entry before any step")
                key, sep, value = line[len(CONFIG_PREFIX):].rpartition(":")
                if not sep or not key:
                    raise RecipeFormatError(f"Line {lineno}: expected '-->KEY:VALUE', got {line!r}")
                try:
                    recipe.configure(index, key, float(value))
                except ValueError:
                    raise RecipeFormatError(f"Line {lineno}: invalid value {value!r} for '{key}'")
                continue

            step = registry.get(line)
            if step is None:
                raise StepNotFoundError(f"Line {lineno}: unknown step '{line}'")
            index = recipe.add(step)

        return recipe

    def __repr__(self) -> str:
        return f"Recipe(steps={[s.name for s in self._steps]})"
