"""Run fallible cookbook recipes.

    python -m cookbook                                   # list recipes
    python -m cookbook safe-division --a 4 --b 0
    python -m cookbook getting-started/fetch-cat-fact -- --url https://example.invalid/

A recipe is named by its path under ``cookbook/`` without ``.py``, or by its
file stem alone when that is unique. Everything after the recipe name (an
optional leading ``--`` is dropped) is handed to the recipe's own parser.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path
import runpy
import sys
from typing import TYPE_CHECKING

from fallible import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Sequence

COOKBOOK = Path(__file__).resolve().parent
SKIP = {"utils", "__pycache__"}


@dataclass(frozen=True)
class Recipe:
    """A runnable recipe file and the name it is invoked by."""

    name: str
    path: Path

    @property
    def summary(self) -> str:
        """First docstring line, without the ``Recipe:`` prefix."""
        doc = ast.get_docstring(ast.parse(self.path.read_text(encoding="utf-8")))
        first = (doc or "").partition("\n")[0]
        return first.removeprefix("Recipe:").strip()


def recipes() -> list[Recipe]:
    """All recipes under the cookbook directory, sorted by name."""
    found = [
        Recipe(path.relative_to(COOKBOOK).with_suffix("").as_posix(), path)
        for path in COOKBOOK.glob("*/*.py")
        if path.parent.name not in SKIP
    ]
    return sorted(found, key=lambda r: r.name)


def _normalize(query: str) -> str:
    name = query.removeprefix("cookbook/").removesuffix(".py")
    return name.replace(".", "/").replace("_", "-")


def find_recipe(query: str) -> Result[Recipe, str]:
    """Look a recipe up by full name, dotted name or unique stem."""
    wanted = _normalize(query)
    available = recipes()
    exact = [r for r in available if r.name == wanted]
    if exact:
        return Ok(exact[0])

    by_stem = [r for r in available if r.path.stem == wanted]
    if len(by_stem) == 1:
        return Ok(by_stem[0])
    if by_stem:
        names = ", ".join(r.name for r in by_stem)
        return Err(f"Recipe {query!r} is ambiguous: {names}")
    return Err(f"Unknown recipe {query!r}. Run 'python -m cookbook' to list recipes.")


def print_recipes(available: Sequence[Recipe]) -> None:
    print("Recipes:")
    width = max((len(r.name) for r in available), default=0)
    for recipe in available:
        print(f"  {recipe.name:<{width}}  {recipe.summary}")
    print("\nRun one with: python -m cookbook <recipe> [recipe options]")


def run(recipe: Recipe, args: Sequence[str]) -> int:
    """Execute ``recipe`` as ``__main__`` with ``args`` as its command line."""
    saved = sys.argv
    sys.argv = [str(recipe.path), *args]
    try:
        runpy.run_path(str(recipe.path), run_name="__main__")
    finally:
        sys.argv = saved
    return 0


def _report(message: str) -> int:
    print(message, file=sys.stderr)
    return 2


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in {"-l", "--list", "-h", "--help"}:
        print_recipes(recipes())
        return 0

    query, rest = args[0], args[1:]
    if rest[:1] == ["--"]:
        rest = rest[1:]
    return find_recipe(query).fold(lambda recipe: run(recipe, rest), _report)


if __name__ == "__main__":
    raise SystemExit(main())
