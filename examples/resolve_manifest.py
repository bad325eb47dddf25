"""Resolve and print the extension manifest of a project directory.

Usage::

    python examples/resolve_manifest.py examples/projects/web-mining
"""

import logging
import sys

from rmxbuild import DescriptorEngine, ExtensionError, load_project


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    root = argv[1] if len(argv) > 1 else "."
    try:
        build = DescriptorEngine(load_project(root)).run()
    except ExtensionError as e:
        print(e, file=sys.stderr)
        return 1
    print(build.manifest.render(), end="")
    for dependency in build.provided:
        print(f"provided: {dependency}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
