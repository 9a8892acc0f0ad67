"""
CLI interface for recipelab.

Provides commands to interpret a recipe, generate code from it, store it,
list the registered steps and validate the setup.

The recipe comes from --recipe (a YAML definition or a stored .recipe file),
from the 'recipe' entry of the configuration, or defaults to the built-in
demo recipe.
"""

from pathlib import Path
from typing import Optional

import click

from recipelab import __version__
from recipelab.errors import RecipeLabError


def _load_recipe(registry, recipe_path: Optional[Path]):
    """Build the recipe to work on."""
    from recipelab.builder import build_recipe, load_recipe_definition
    from recipelab.demo import build_demo_recipe
    from recipelab.recipe import Recipe

    if recipe_path is None:
        return build_demo_recipe(registry)

    if recipe_path.suffix == ".recipe":
        return Recipe.load(recipe_path, registry)

    return build_recipe(registry, load_recipe_definition(recipe_path))


def _prepare(ctx, recipe_path: Optional[Path]):
    """Registry + recipe for a command, exiting on setup errors."""
    from recipelab.demo import default_registry
    from recipelab.utils import print_error

    config = ctx.obj["config"]
    try:
        registry = default_registry()
        registry.require_valid()
        recipe = _load_recipe(registry, recipe_path or config.recipe_path)
    except RecipeLabError as e:
        print_error(str(e))
        raise SystemExit(1)
    return registry, recipe


@click.group()
@click.version_option(version=__version__, prog_name="recipelab")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file (default: ./recipelab.yaml if present)",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, config_path: Optional[Path], verbose: bool):
    """
    recipelab - interpret recipes of steps or turn them into Python code.
    """
    from recipelab.config import load_config
    from recipelab.utils import print_error, setup_logging

    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
        config.validate_logging()
    except RecipeLabError as e:
        print_error(f"Configuration invalid: {e}")
        raise SystemExit(1)

    setup_logging(
        log_level="DEBUG" if verbose else config.get_log_level(),
        log_format=config.get_log_format(),
        log_file=config.get_log_file_path(),
        console_output=config.should_log_to_console(),
    )
    ctx.obj["config"] = config


@main.command("run")
@click.option(
    "--recipe",
    "recipe_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML recipe definition or stored .recipe file",
)
@click.option("--no-store", is_flag=True, help="Do not store the recipe after running")
@click.pass_context
def run_command(ctx, recipe_path: Optional[Path], no_store: bool):
    """
    Interpret a recipe.

    Examples:

        recipelab run

        recipelab run --recipe recipes/demo.yaml
    """
    from recipelab.executor import run
    from recipelab.model import Model
    from recipelab.utils import (
        format_duration_ns,
        print_banner,
        print_key,
        print_step,
        print_success,
        print_time,
        print_warning,
    )

    config = ctx.obj["config"]
    _, recipe = _prepare(ctx, recipe_path)

    if not no_store:
        config.output_dir.mkdir(parents=True, exist_ok=True)
        recipe.persist(config.output_path("recipe"))

    print_banner(f"Running recipe ({len(recipe)} steps)")

    model = Model()
    try:
        result = run(recipe, model, print_step, print_key, print_time)
    finally:
        model.cleanup()

    total = format_duration_ns(sum(result.durations_ns))
    if result.completed:
        print_success(f"Recipe completed: {result.steps_run} steps in {total}")
    else:
        print_warning(
            f"Recipe stopped by step {result.stopped_at} "
            f"({recipe.get(result.stopped_at).name}) after {result.steps_run} steps"
        )


@main.command("generate")
@click.option(
    "--recipe",
    "recipe_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML recipe definition or stored .recipe file",
)
@click.option("--inline/--no-inline", default=True, help="Write the single-script version")
@click.option("--functions/--no-functions", default=True, help="Write the library + driver version")
@click.pass_context
def generate_command(ctx, recipe_path: Optional[Path], inline: bool, functions: bool):
    """
    Generate Python programs equivalent to running a recipe.

    Examples:

        recipelab generate

        recipelab generate --no-functions
    """
    from recipelab.codegen import FunctionCodeGenerator, InlineCodeGenerator
    from recipelab.model import DOMAIN_CODE
    from recipelab.utils import print_success

    config = ctx.obj["config"]
    _, recipe = _prepare(ctx, recipe_path)
    config.output_dir.mkdir(parents=True, exist_ok=True)

    if inline:
        path = InlineCodeGenerator(DOMAIN_CODE).write(recipe, config.output_path("inline_script"))
        print_success(f"Inline script: {path}")

    if functions:
        generated = FunctionCodeGenerator(DOMAIN_CODE).write(
            recipe,
            config.output_path("library"),
            config.output_path("driver"),
        )
        print_success(
            f"Library: {config.output_path('library')} ({len(generated.functions)} functions), "
            f"driver: {config.output_path('driver')}"
        )


@main.command("store")
@click.option(
    "--recipe",
    "recipe_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML recipe definition or stored .recipe file",
)
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Destination file")
@click.pass_context
def store_command(ctx, recipe_path: Optional[Path], output: Optional[Path]):
    """Store a recipe in the text format."""
    from recipelab.utils import print_success

    config = ctx.obj["config"]
    _, recipe = _prepare(ctx, recipe_path)

    if output is None:
        config.output_dir.mkdir(parents=True, exist_ok=True)
        output = config.output_path("recipe")
    recipe.persist(output)
    print_success(f"Stored {len(recipe)} steps to {output}")


@main.command("steps")
def list_steps():
    """List registered steps."""
    from recipelab.demo import default_registry

    registry = default_registry()
    for index, step in enumerate(registry):
        info = step.describe()
        flags = []
        if info.always_same_code:
            flags.append("same-code")
        if info.returns_stop:
            flags.append(f"stops-on:{info.stop_variable}")
        click.echo(f"{index:2d}  {step.name:<14} {' '.join(flags)}".rstrip())


@main.command("validate")
@click.pass_context
def validate_command(ctx):
    """Validate the configuration, the registry and the recipe."""
    from recipelab.utils import print_banner, print_error, print_success

    config = ctx.obj["config"]
    print_banner("Validation")

    try:
        config.validate()
    except RecipeLabError as e:
        print_error(f"Configuration invalid: {e}")
        raise SystemExit(1)
    print_success("Configuration valid")

    registry, recipe = _prepare(ctx, None)
    print_success(f"Registry valid ({len(registry)} steps)")
    print_success(f"Recipe valid ({len(recipe)} steps)")


if __name__ == "__main__":
    main()
