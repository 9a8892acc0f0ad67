"""
StepSchema - the named, reusable definition of one operation.

A StepSchema bundles three behaviors that must stay mutually consistent:
- describe: pure function returning StepInfo (code invariance, abort capability)
- execute:  runtime behavior, (ConfigMap, model) -> bool "continue"
- emit:     source behavior, ConfigMap -> (code lines, CodeInfo)

The code emitted for a configuration must do exactly what the executor does
for that configuration.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .config_map import ConfigMap

# Ordered list of source code lines
CodeLines = list[str]


@dataclass(frozen=True)
class StepInfo:
    """
    Metadata about a step schema.

    Attributes:
        always_same_code: Emitted code is identical for every configuration,
            so the function generator may share one function between instances
        returns_stop: Execution may abort the recipe
        stop_variable: Name of the boolean variable the emitted code assigns;
            False means "stop". Required when returns_stop is set.
    """
    always_same_code: bool = False
    returns_stop: bool = False
    stop_variable: Optional[str] = None

    def __post_init__(self):
        if self.returns_stop and not self.stop_variable:
            raise ValueError("stop_variable is required when returns_stop is set")
        if self.stop_variable and not self.returns_stop:
            raise ValueError("stop_variable is only valid when returns_stop is set")


@dataclass(frozen=True)
class CodeInfo:
    """Information on generated code: whether it needs its own lexical scope."""
    needs_scope: bool = False


Describer = Callable[[], StepInfo]
Executor = Callable[[ConfigMap, Any], bool]
Emitter = Callable[[ConfigMap], tuple[CodeLines, CodeInfo]]


def same_code_info() -> StepInfo:
    """Describer for schemas whose code never depends on configuration."""
    return StepInfo(always_same_code=True)


def default_info() -> StepInfo:
    """Describer for parameterized schemas that never abort."""
    return StepInfo()


@dataclass(frozen=True)
class StepSchema:
    """
    A step schema as stored in the registry.

    Attributes:
        name: Unique-by-convention step name
        describe: Returns the StepInfo for this schema
        execute: Runs the step against the model, returns False to stop
        emit: Produces the source lines equivalent to execute
    """
    name: str
    describe: Optional[Describer]
    execute: Optional[Executor]
    emit: Optional[Emitter]

    def is_valid(self) -> bool:
        """True if the schema has a name and all three behaviors."""
        if not isinstance(self.name, str) or not self.name:
            return False
        return all(callable(f) for f in (self.describe, self.execute, self.emit))

    def info(self) -> StepInfo:
        """Call the describer."""
        return self.describe()

    def __repr__(self) -> str:
        return f"StepSchema(name={self.name!r})"
