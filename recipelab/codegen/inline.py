"""
Inline code generator - one flat Python script for a whole recipe.

The script mirrors the interpreter step by step:

    def main():
        model = SimpleNamespace(data=[], res=0.0)

        # sum
        model.res = sum(model.data, 0.0)

        def _scope_7():
            # check
            # ref : 45
            expected_value = 45.0
            res_ok = expected_value == model.res
            if not res_ok:
                # cleanup
                model.data.clear()
                return False
            return True
        if not _scope_7():
            return 0

        # cleanup
        model.data.clear()

        return 0

Python only has function scope, so a step whose code needs its own scope is
placed in a local function called in place. An abort-capable step gets a
guard that runs cleanup and leaves main() early, exactly where the
interpreter would stop.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from recipelab.recipe import Recipe, StepInstance

from .base import (
    DomainCode,
    Now,
    config_comments,
    entry_point,
    header,
    imports,
    indent,
    join,
    write_text,
)

logger = logging.getLogger(__name__)


class InlineCodeGenerator:
    """
    Generator for the single-script projection of a recipe.

    Usage:
        generator = InlineCodeGenerator(DOMAIN_CODE)
        source = generator.generate(recipe)
        generator.write(recipe, "my_app.py")
    """

    def __init__(self, domain: DomainCode, now: Optional[Now] = None):
        """
        Initialize the generator.

        Args:
            domain: Setup/cleanup/import fragments of the domain
            now: Clock for the timestamp comment (default: current UTC time)
        """
        self._domain = domain
        self._now = now

    def _cleanup_block(self) -> list[str]:
        return ["# cleanup", *self._domain.cleanup]

    def _step_block(self, index: int, step: StepInstance) -> list[str]:
        """Lines of one instance, placed in a scope function when required."""
        code, code_info = step.make_code()
        step_info = step.info()

        block = [f"# {step.name}", *config_comments(step), *code]

        if step_info.returns_stop:
            block.append(f"if not {step_info.stop_variable}:")
            block.extend(indent(self._cleanup_block()))
            block.extend(indent(["return False" if code_info.needs_scope else "return 0"]))

        if not code_info.needs_scope:
            return block

        scope = f"_scope_{index}"
        if not code and not step_info.returns_stop:
            block.append("pass")

        lines = [f"def {scope}():", *indent(block)]
        if step_info.returns_stop:
            lines.extend(indent(["return True"]))
            lines.extend([f"if not {scope}():", *indent(["return 0"])])
        else:
            lines.append(f"{scope}()")
        return lines

    def generate(self, recipe: Recipe) -> str:
        """
        Generate the script source.

        Args:
            recipe: The recipe to project

        Returns:
            Python source text of the script
        """
        body = list(self._domain.setup)

        for index, step in enumerate(recipe):
            body.append("")
            body.extend(self._step_block(index, step))

        body.append("")
        body.extend(self._cleanup_block())
        body.extend(["", "return 0"])

        lines = [
            *header(self._now),
            "",
            *imports(self._domain),
            "",
            "",
            "def main():",
            *indent(body),
            *entry_point(),
        ]
        return join(lines)

    def write(self, recipe: Recipe, destination: Union[str, Path]) -> Path:
        """Generate the script and write it to ``destination``."""
        logger.info(f"Generating inline script for {len(recipe)} steps")
        return write_text(destination, self.generate(recipe))


def create_code(
    recipe: Recipe,
    destination: Union[str, Path],
    domain: DomainCode,
    now: Optional[Now] = None,
) -> Path:
    """
    Convenience function to write the inline script of a recipe.

    Args:
        recipe: The recipe to project
        destination: Output path of the script
        domain: Domain code fragments
        now: Clock for the timestamp comment

    Returns:
        Path of the written script
    """
    return InlineCodeGenerator(domain, now=now).write(recipe, destination)
