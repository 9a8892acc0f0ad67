"""
Function code generator - a library of step functions plus a driver.

Library: one function per distinct step, each taking the domain state.
Instances of a parameter-invariant schema share a single function named after
the schema; every other instance gets ``<name>_<index>``. When two different
steps sanitize to the same name (``a-b`` and ``a_b``), the later one gets a
``_2``, ``_3``, ... suffix. Abort-capable functions end with
``return <stop_variable>``. A fixed ``_cleanup`` function is always emitted.

Driver: declares the domain state, calls the derived function of every
instance in recipe order (deduplication never removes a call site), guards
abort-capable calls with cleanup + early exit, then cleans up.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Hashable, Optional, Union

from recipelab.recipe import Recipe

from .base import (
    DomainCode,
    Now,
    config_comments,
    entry_point,
    function_name,
    header,
    imports,
    indent,
    join,
    write_text,
)

logger = logging.getLogger(__name__)

CLEANUP_FUNCTION = "_cleanup"


@dataclass
class GeneratedFunctions:
    """
    Output of the function generator.

    Attributes:
        library: Source of the function library module
        driver: Source of the driver module
        functions: Names of the emitted step functions, in emission order
        calls: Derived function name called for each instance, in recipe order
    """
    library: str
    driver: str
    functions: list[str] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)


def _unique_name(base: str, taken: set[str]) -> str:
    """Return base, or base_2, base_3, ... when it is already taken."""
    name = base
    suffix = 2
    while name in taken:
        name = f"{base}_{suffix}"
        suffix += 1
    if name != base:
        logger.debug(f"Function name {base} already taken, using {name}")
    return name


class FunctionCodeGenerator:
    """
    Generator for the library + driver projection of a recipe.

    Usage:
        generator = FunctionCodeGenerator(DOMAIN_CODE)
        generator.write(recipe, "my_library.py", "my_app_2.py")
    """

    def __init__(self, domain: DomainCode, now: Optional[Now] = None):
        """
        Initialize the generator.

        Args:
            domain: Setup/cleanup/import fragments of the domain
            now: Clock for the timestamp comments (default: current UTC time)
        """
        self._domain = domain
        self._now = now

    def generate(self, recipe: Recipe, library_module: str) -> GeneratedFunctions:
        """
        Generate library and driver sources.

        Args:
            recipe: The recipe to project
            library_module: Module name the driver imports the library from

        Returns:
            GeneratedFunctions with both sources and the naming decisions
        """
        state = self._domain.state
        assigned: dict[Hashable, str] = {}
        taken: set[str] = {CLEANUP_FUNCTION}
        functions: list[str] = []
        library = [*header(self._now), "", *imports(self._domain, entry=False)]

        driver_body = list(self._domain.setup)
        calls: list[str] = []

        for index, step in enumerate(recipe):
            info = step.info()
            owner = step.name if info.always_same_code else (step.name, index)
            name = assigned.get(owner)

            if name is None:
                name = _unique_name(function_name(step, info, index), taken)
                assigned[owner] = name
                taken.add(name)

                code, _ = step.make_code()
                body = [*config_comments(step), *code]
                if info.returns_stop:
                    body.append(f"return {info.stop_variable}")
                if not code and not info.returns_stop:
                    body.append("pass")

                library.extend(["", "", f"def {name}({state}):", *indent(body)])
                functions.append(name)
            else:
                logger.debug(f"Step {index} ({step.name}) reuses function {name}")
            calls.append(name)

            driver_body.append("")
            call = f"{name}({state})"
            if info.returns_stop:
                driver_body.append(f"if not {call}:")
                driver_body.extend(indent([f"{CLEANUP_FUNCTION}({state})", "return 0"]))
            else:
                driver_body.append(call)

        cleanup = list(self._domain.cleanup) or ["pass"]
        library.extend(["", "", f"def {CLEANUP_FUNCTION}({state}):", *indent(cleanup)])

        driver_body.extend(["", f"{CLEANUP_FUNCTION}({state})", "", "return 0"])

        imported = sorted({*functions, CLEANUP_FUNCTION})
        driver = [
            *header(self._now),
            "",
            *imports(self._domain),
            "",
            f"from {library_module} import (",
            *indent([f"{n}," for n in imported]),
            ")",
            "",
            "",
            "def main():",
            *indent(driver_body),
            *entry_point(),
        ]

        return GeneratedFunctions(
            library=join(library),
            driver=join(driver),
            functions=functions,
            calls=calls,
        )

    def write(
        self,
        recipe: Recipe,
        library_path: Union[str, Path],
        driver_path: Union[str, Path],
    ) -> GeneratedFunctions:
        """
        Generate both modules and write them to disk.

        The driver imports the library by the library file's stem, so both
        files should live in the same directory.
        """
        library_path = Path(library_path)
        generated = self.generate(recipe, library_module=library_path.stem)
        logger.info(
            f"Generating {len(generated.functions)} functions for {len(recipe)} steps"
        )
        write_text(library_path, generated.library)
        write_text(driver_path, generated.driver)
        return generated


def create_code_func(
    recipe: Recipe,
    library_path: Union[str, Path],
    driver_path: Union[str, Path],
    domain: DomainCode,
    now: Optional[Now] = None,
) -> GeneratedFunctions:
    """Convenience function to write the library + driver pair of a recipe."""
    return FunctionCodeGenerator(domain, now=now).write(recipe, library_path, driver_path)
