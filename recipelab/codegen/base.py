"""
Shared pieces of the code generators.

Generated programs are Python modules. The domain contributes the imports,
the setup preamble declaring the domain state and the cleanup sequence;
steps contribute their emitted lines.
"""

import builtins
import keyword
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from recipelab.recipe import StepInstance
from recipelab.schemas import StepInfo

logger = logging.getLogger(__name__)

INDENT = "    "

Now = Callable[[], datetime]


@dataclass(frozen=True)
class DomainCode:
    """
    Source fragments a domain contributes to generated programs.

    Attributes:
        setup: Lines declaring the domain state (run first in main())
        cleanup: Lines releasing the domain state
        imports: Import lines the setup, cleanup or step code rely on
        state: Name of the domain state variable / function parameter
    """
    setup: tuple[str, ...]
    cleanup: tuple[str, ...]
    imports: tuple[str, ...] = ()
    state: str = "model"


def _utcnow() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def header(now: Optional[Now] = None) -> list[str]:
    """Leading timestamp comment of a generated module."""
    stamp = (now or _utcnow)()
    return [f"# Generated by recipelab on {stamp.isoformat(timespec='seconds')}"]


def indent(lines: Iterable[str], depth: int = 1) -> list[str]:
    """Indent non-empty lines by ``depth`` levels."""
    prefix = INDENT * depth
    return [f"{prefix}{line}" if line else "" for line in lines]


def config_comments(step: StepInstance) -> list[str]:
    """One '# key : value' comment per config entry, in key order."""
    return [f"# {key} : {value:g}" for key, value in step.config.items()]


def function_name(step: StepInstance, info: StepInfo, index: int) -> str:
    """
    Derive the generated function name for the instance at ``index``.

    Parameter-invariant schemas share one function named after the schema;
    every other instance gets its own ``name_index`` function. Names that
    would shadow a Python keyword or builtin (sum, print) get a trailing
    underscore.
    """
    base = re.sub(r"\W", "_", step.name)
    if base[:1].isdigit():
        base = f"_{base}"
    if keyword.iskeyword(base) or hasattr(builtins, base):
        base = f"{base}_"
    if info.always_same_code:
        return base
    return f"{base}_{index}"


def entry_point() -> list[str]:
    return ["", "", 'if __name__ == "__main__":', f"{INDENT}sys.exit(main())"]


def imports(domain: DomainCode, entry: bool = True) -> list[str]:
    """Import block: sys when the module has an entry point, then the domain imports."""
    lines = [line for line in domain.imports if line != "import sys"]
    return ["import sys", *lines] if entry else lines


def write_text(path: Union[str, Path], text: str) -> Path:
    """Write a generated module, overwriting any previous file."""
    path = Path(path)
    with open(path, "w") as f:
        f.write(text)
    logger.info(f"Wrote {path}")
    return path


def join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)
