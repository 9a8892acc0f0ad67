"""Tests for recipelab.codegen.inline module.

Tests the exact layout of the generated script: comments, scopes, abort
guards, cleanup and exit.
"""

from recipelab import steps
from recipelab.builder import RecipeBuilder
from recipelab.codegen import DomainCode, InlineCodeGenerator, create_code
from recipelab.model import DOMAIN_CODE
from recipelab.recipe import Recipe
from recipelab.schemas import StepInfo


EXPECTED_SMALL = '''\
# Generated by recipelab on 2026-01-02T03:04:05+00:00

import sys
import math
from types import SimpleNamespace


def main():
    model = SimpleNamespace(data=[], res=0.0)

    # hello_world
    print("Hello World!")

    def _scope_1():
        # set_values
        # cnt : 2
        cnt = 2
        model.data[:] = [float(i) for i in range(cnt)]
    _scope_1()

    def _scope_2():
        # check
        # ref : 1
        expected_value = 1.0
        res_ok = expected_value == model.res
        if not res_ok:
            # cleanup
            model.data.clear()
            return False
        return True
    if not _scope_2():
        return 0

    # cleanup
    model.data.clear()

    return 0


if __name__ == "__main__":
    sys.exit(main())
'''


class TestInlineLayout:
    """Tests for the generated script text."""

    def test_small_recipe(self, registry, fixed_now):
        recipe = (
            RecipeBuilder(registry)
            .add(steps.HELLO_WORLD)
            .add(steps.SET_VALUES, {"cnt": 2})
            .add(steps.CHECK, {"ref": 1})
            .build()
        )

        source = InlineCodeGenerator(DOMAIN_CODE, now=fixed_now).generate(recipe)

        assert source == EXPECTED_SMALL

    def test_unscoped_step_inline(self, registry, fixed_now):
        recipe = RecipeBuilder(registry).add(steps.SET_VALUES, {"cnt": 0}).build()
        source = InlineCodeGenerator(DOMAIN_CODE, now=fixed_now).generate(recipe)

        assert "    # set_values\n    # cnt : 0\n    model.data.clear()\n" in source
        assert "_scope_" not in source

    def test_unscoped_abort_guard_exits_main(self, fixed_now, schema_factory):
        recipe = Recipe()
        recipe.add(schema_factory(
            "guard",
            info=StepInfo(returns_stop=True, stop_variable="ok"),
            code=["ok = bool(model.data)"],
        ))

        source = InlineCodeGenerator(DOMAIN_CODE, now=fixed_now).generate(recipe)

        assert (
            "    # guard\n"
            "    ok = bool(model.data)\n"
            "    if not ok:\n"
            "        # cleanup\n"
            "        model.data.clear()\n"
            "        return 0\n"
        ) in source

    def test_empty_scope_gets_pass(self, fixed_now, schema_factory):
        recipe = Recipe()
        recipe.add(schema_factory("nothing", needs_scope=True))

        source = InlineCodeGenerator(DOMAIN_CODE, now=fixed_now).generate(recipe)

        assert "    def _scope_0():\n        # nothing\n        pass\n    _scope_0()\n" in source

    def test_every_abort_step_guarded(self, demo_recipe, fixed_now):
        source = InlineCodeGenerator(DOMAIN_CODE, now=fixed_now).generate(demo_recipe)

        assert source.count("if not populated:") == 2
        assert source.count("if not res_ok:") == 1
        assert source.count("return False") == 3
        assert source.count("# cleanup") == 4

    def test_config_comments_in_key_order(self, fixed_now, schema_factory):
        recipe = Recipe()
        index = recipe.add(schema_factory("multi"))
        recipe.configure(index, "z", 2)
        recipe.configure(index, "a", 0.5)

        source = InlineCodeGenerator(DOMAIN_CODE, now=fixed_now).generate(recipe)

        assert "    # multi\n    # a : 0.5\n    # z : 2\n" in source

    def test_custom_domain(self, fixed_now, schema_factory):
        domain = DomainCode(setup=("model = []",), cleanup=(), imports=())
        recipe = Recipe()
        recipe.add(schema_factory("noop", code=["model.append(1)"]))

        source = InlineCodeGenerator(domain, now=fixed_now).generate(recipe)

        assert source.startswith("# Generated by recipelab on 2026-01-02T03:04:05+00:00\n\nimport sys\n\n\ndef main():\n")
        assert "    model = []\n" in source

    def test_create_code_writes_file(self, demo_recipe, fixed_now, tmp_path):
        path = create_code(demo_recipe, tmp_path / "my_app.py", DOMAIN_CODE, now=fixed_now)

        assert path.read_text() == InlineCodeGenerator(DOMAIN_CODE, now=fixed_now).generate(demo_recipe)
