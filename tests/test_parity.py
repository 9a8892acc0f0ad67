"""Tests that generated programs behave like the interpreter.

Each recipe is interpreted once and projected into the inline script and the
library + driver pair. Both generated programs are then executed and must
print exactly what the interpreter printed, including stopping at the same
step.
"""

import runpy
import sys

import pytest

from recipelab import steps
from recipelab.builder import RecipeBuilder
from recipelab.codegen import create_code, create_code_func
from recipelab.executor import run
from recipelab.model import DOMAIN_CODE, Model
from recipelab.recipe import Recipe


def _interpret(recipe, capsys) -> str:
    capsys.readouterr()
    model = Model()
    try:
        run(recipe, model)
    finally:
        model.cleanup()
    return capsys.readouterr().out


def _run_inline(recipe, tmp_path, capsys) -> str:
    script = create_code(recipe, tmp_path / "my_app.py", DOMAIN_CODE)
    namespace = runpy.run_path(str(script))
    capsys.readouterr()
    assert namespace["main"]() == 0
    return capsys.readouterr().out


def _run_functions(recipe, tmp_path, capsys, monkeypatch, library: str) -> str:
    create_code_func(recipe, tmp_path / f"{library}.py", tmp_path / "my_app_2.py", DOMAIN_CODE)
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, library, raising=False)
    namespace = runpy.run_path(str(tmp_path / "my_app_2.py"))
    capsys.readouterr()
    assert namespace["main"]() == 0
    return capsys.readouterr().out


def _aborting_on_value(registry):
    return (
        RecipeBuilder(registry)
        .add(steps.SET_VALUES, {"cnt": 3})
        .add(steps.SUM)
        .add(steps.PRINT)
        .add(steps.CHECK, {"ref": 99})
        .add(steps.HELLO_WORLD)
        .build()
    )


def _aborting_on_empty(registry):
    return (
        RecipeBuilder(registry)
        .add(steps.HELLO_WORLD)
        .add(steps.SET_VALUES, {"cnt": 0})
        .add(steps.CHECK_DATA)
        .add(steps.PRINT_NUMBER, {"num": 7})
        .build()
    )


def _arithmetic(registry):
    return (
        RecipeBuilder(registry)
        .add(steps.SET_VALUES, {"cnt": 5})
        .add(steps.PRINT_DATA)
        .add(steps.SUM)
        .add(steps.CHECK, {"ref": 10})
        .add(steps.PRINT)
        .add(steps.RESET)
        .add(steps.SET_VALUES, {"cnt": 4})
        .add(steps.PRODUCT)
        .add(steps.PRINT)
        .add(steps.PRINT_NUMBER, {"num": 2.5})
        .build()
    )


RECIPES = {
    "aborting_on_value": _aborting_on_value,
    "aborting_on_empty": _aborting_on_empty,
    "arithmetic": _arithmetic,
}


class TestParity:
    """Interpreter vs generated programs."""

    def test_demo_inline(self, demo_recipe, tmp_path, capsys):
        expected = _interpret(demo_recipe, capsys)

        assert _run_inline(demo_recipe, tmp_path, capsys) == expected

    def test_demo_functions(self, demo_recipe, tmp_path, capsys, monkeypatch):
        expected = _interpret(demo_recipe, capsys)

        output = _run_functions(demo_recipe, tmp_path, capsys, monkeypatch, "parity_demo_lib")

        assert output == expected

    @pytest.mark.parametrize("name", sorted(RECIPES))
    def test_inline(self, name, registry, tmp_path, capsys):
        recipe = RECIPES[name](registry)
        expected = _interpret(recipe, capsys)

        assert _run_inline(recipe, tmp_path, capsys) == expected

    @pytest.mark.parametrize("name", sorted(RECIPES))
    def test_functions(self, name, registry, tmp_path, capsys, monkeypatch):
        recipe = RECIPES[name](registry)
        expected = _interpret(recipe, capsys)

        output = _run_functions(recipe, tmp_path, capsys, monkeypatch, f"parity_{name}_lib")

        assert output == expected

    def test_abort_stops_output(self, registry, tmp_path, capsys):
        recipe = _aborting_on_value(registry)

        output = _run_inline(recipe, tmp_path, capsys)

        assert output == "Result: 3.0\n"
        assert "Hello World!" not in output

    def test_abort_on_empty_buffer(self, registry, tmp_path, capsys, monkeypatch):
        recipe = _aborting_on_empty(registry)

        output = _run_functions(recipe, tmp_path, capsys, monkeypatch, "parity_empty_lib")

        assert output == "Hello World!\n"

    def test_clashing_function_names(self, schema_factory, tmp_path, capsys, monkeypatch):
        def printer(text):
            def execute(config, model):
                print(text)
                return True
            return execute

        recipe = Recipe()
        recipe.add(schema_factory("a-b", execute=printer("A"), code=['print("A")']))
        recipe.add(schema_factory("a_b", execute=printer("B"), code=['print("B")']))
        expected = _interpret(recipe, capsys)

        output = _run_functions(recipe, tmp_path, capsys, monkeypatch, "parity_clash_lib")

        assert expected == "A\nB\n"
        assert output == expected
        assert _run_inline(recipe, tmp_path, capsys) == expected
