"""
StepRegistry - the catalog of known step schemas.

The registry provides:
- Append-only registration of StepSchemas (no uniqueness check)
- Lookup by index or by name
- Validation of every registered schema

Name lookup is a first-match linear scan. A schema registered under a name
that is already taken is reachable only by index. This is current behavior,
kept as-is; callers that care should check names() for duplicates.
"""

import logging
from typing import Iterator, Optional, Union

from recipelab.errors import RegistryValidationError
from recipelab.schemas import StepSchema

logger = logging.getLogger(__name__)


class StepRegistry:
    """
    Registry of StepSchemas.

    Usage:
        registry = StepRegistry()
        registry.register(StepSchema("sum", same_code_info, calculate_sum, sum_code))

        registry.require_valid()
        schema = registry.get("sum")
        first = registry.get(0)
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._steps: list[StepSchema] = []

    def register(self, schema: StepSchema) -> None:
        """
        Append a step schema.

        Never fails and does not check for duplicate names.

        Args:
            schema: The schema to register
        """
        if self.get(schema.name) is not None:
            logger.debug(f"Step '{schema.name}' already registered; new entry reachable by index only")
        self._steps.append(schema)

    def get(self, key: Union[int, str]) -> Optional[StepSchema]:
        """
        Get a schema by index or by name.

        Args:
            key: Position in registration order, or step name

        Returns:
            The schema, or None if the index is out of range or no schema
            has the name (first match wins for duplicate names)
        """
        if isinstance(key, int) and not isinstance(key, bool):
            if 0 <= key < len(self._steps):
                return self._steps[key]
            return None

        for step in self._steps:
            if step.name == key:
                return step
        return None

    def names(self) -> list[str]:
        """
        List registered names in registration order.

        Returns:
            Step names, duplicates included
        """
        return [s.name for s in self._steps]

    def validate(self) -> bool:
        """
        Check every registered schema.

        Returns:
            True if every schema has a non-empty name and a describer,
            an executor and an emitter
        """
        return all(s.is_valid() for s in self._steps)

    def require_valid(self) -> None:
        """
        Validate the registry, raising if it is unusable.

        Raises:
            RegistryValidationError: If any schema is incomplete
        """
        if self.validate():
            return

        invalid = [
            f"#{i} ({s.name!r})" for i, s in enumerate(self._steps) if not s.is_valid()
        ]
        raise RegistryValidationError(
            f"Invalid step schemas in registry: {', '.join(invalid)}"
        )

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[StepSchema]:
        return iter(self._steps)
