"""Wayfinder CLI: inspect the rewrite policy and resolve targets.

Entry point registered as ``wayfinder`` in ``pyproject.toml``::

    [project.scripts]
    wayfinder = "wayfinder.cli:main"
"""

import argparse
import sys

from wayfinder.context import HostingMode, LifecyclePhase


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wayfinder`` command."""
    parser = argparse.ArgumentParser(
        prog="wayfinder",
        description="Wayfinder: resolve declarative navigation directives.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wayfinder matrix ---------------------------------------------------
    subparsers.add_parser("matrix", help="Print the render rewrite policy table")

    # -- wayfinder resolve --------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a resource target")
    resolve_parser.add_argument("resource", help="Resource expression (e.g. page2.xhtml)")
    resolve_parser.add_argument(
        "--hosting",
        choices=[m.value for m in HostingMode],
        default=HostingMode.STANDALONE.value,
        help="Hosting topology",
    )
    resolve_parser.add_argument(
        "--phase",
        choices=[p.value for p in LifecyclePhase],
        default=LifecyclePhase.STEADY_STATE.value,
        help="Lifecycle phase of the processing cycle",
    )
    resolve_parser.add_argument("--url-type", default=None, help="resource or render")
    resolve_parser.add_argument("--show", default=None, help="replace or new")
    resolve_parser.add_argument("--target", default=None, help="Named navigation target")
    resolve_parser.add_argument(
        "--no-rewrite",
        action="store_true",
        help="Keep the target exactly as given",
    )
    resolve_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not request a progress indicator",
    )
    resolve_parser.add_argument("--context-path", default="", help="Application context prefix")
    resolve_parser.add_argument("--base-path", default="/", help="Base for relative targets")
    resolve_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on targets that cannot be resolved",
    )
    resolve_parser.add_argument(
        "--emit",
        action="store_true",
        help="Also print the response the executor would send",
    )
    resolve_parser.add_argument("--log-level", default="info", help="Logging level")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "matrix":
        from wayfinder.cli._matrix import run_matrix

        run_matrix(args)
    elif args.command == "resolve":
        from wayfinder.cli._resolve import run_resolve

        run_resolve(args)
