#!/usr/bin/env python3
"""
Example: Building the Acorn stylesheets.

Loads the example token document, builds the seven topical stylesheets,
prints one of them and explains where a few tokens land.

Usage:
    python examples/build_stylesheets.py
"""

import tempfile
from pathlib import Path

from acorn_tokens.compiler import TokenBuilder
from acorn_tokens.config import BuildConfig


def main() -> None:
    """Demonstrate a full token build."""
    print("Acorn Token Build Demo")
    print("=" * 40)
    print()

    source = Path(__file__).parent / "design-tokens.yaml"

    with tempfile.TemporaryDirectory() as tmp:
        builder = TokenBuilder(BuildConfig(source=source, output_dir=Path(tmp)))
        tokens = builder.load()
        print(f"Loaded {len(tokens)} tokens from {source.name}")
        print()

        result = builder.build(tokens)
        for path in builder.write(result):
            print(f"  {path.relative_to(tmp)} ({path.stat().st_size} bytes)")
        print()

        print("acorn-colors.css:")
        print(result.files["acorn-tokens/acorn-colors.css"])

        if result.diagnostics:
            print("Diagnostics:")
            for diagnostic in result.diagnostics:
                print(f"  [{diagnostic.code.value}] {diagnostic.message}")
            print()

        print("Where tokens land:")
        names = ("focus-outline-width", "border-color-default", "button-background-color-hover")
        for name in names:
            info = builder.explain(tokens, name)
            print(f"  {name}")
            print(f"    Matches: {', '.join(info['destinations'])}")
            print(f"    Owner: {info['owner']}, section: {info['section']}")
            print(f"    Default: {info['values']['default']}")


if __name__ == "__main__":
    main()
