from datetime import datetime, timezone

import pytest

from recipelab.demo import build_demo_recipe, default_registry
from recipelab.registry import StepRegistry
from recipelab.schemas import CodeInfo, StepInfo, StepSchema, same_code_info


FIXED_TIME = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    return lambda: FIXED_TIME


@pytest.fixture
def registry() -> StepRegistry:
    """Registry holding the example step catalog."""
    return default_registry()


@pytest.fixture
def demo_recipe(registry):
    return build_demo_recipe(registry)


def make_schema(name, execute=None, info=None, code=None, needs_scope=False) -> StepSchema:
    """Build a StepSchema with trivial defaults for the behaviors not given."""
    return StepSchema(
        name=name,
        describe=(lambda: info) if info is not None else same_code_info,
        execute=execute or (lambda config, model: True),
        emit=lambda config: (list(code or []), CodeInfo(needs_scope=needs_scope)),
    )


@pytest.fixture
def schema_factory():
    return make_schema


@pytest.fixture
def stop_info() -> StepInfo:
    return StepInfo(returns_stop=True, stop_variable="ok")
