"""structbind CLI: bind JSON input against a schema and report diagnostics."""

import argparse
import json
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import List, Optional


def _build_parser() -> argparse.ArgumentParser:
    try:
        structbind_version = get_version("structbind")
    except PackageNotFoundError:
        structbind_version = "dev"

    parser = argparse.ArgumentParser(
        prog="structbind",
        description="structbind: bind untyped JSON data to typed schemas"
    )
    parser.add_argument("--version", action="version", version=f"structbind {structbind_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log bind progress to stderr."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    bind_parser = subparsers.add_parser(
        "bind",
        help="Bind a JSON object to a schema and print the result",
        parents=[parent_parser]
    )
    bind_parser.add_argument(
        "--schema",
        required=True,
        help="Schema reference, 'package.module:ClassName'"
    )
    bind_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to a JSON file holding one object"
    )
    bind_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Record unknown fields and type mismatches instead of failing"
    )
    bind_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write bind_result.json here instead of printing it"
    )
    return parser


def _run_bind(args: argparse.Namespace) -> int:
    # Lazy import: only import the kernel when a command runs
    from .api import bind
    from ._internal.canonical_json import canonical_dumps
    from .kernel.errors import StructureError

    try:
        with open(args.input, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read input {args.input}: {e}", file=sys.stderr)
        return 1
    if not isinstance(data, dict):
        print(f"Error: input must be a JSON object, got {type(data).__name__}", file=sys.stderr)
        return 1

    try:
        result = bind(args.schema, data, strict=not args.lenient)
    except StructureError as e:
        print(f"Error [{e.code.value}]: {e}", file=sys.stderr)
        return 1

    result_dict = result.model_dump()
    if args.output_dir is not None:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        result_out = args.output_dir / "bind_result.json"
        result_out.write_text(canonical_dumps(result_dict) + "\n", encoding="utf-8")
        if not args.quiet:
            print(f"[{'OK' if result.ok else 'FAILED'}] Bind complete")
            print(f"  Result: {result_out}")
    elif not args.quiet:
        print(canonical_dumps(result_dict, indent=2))

    if not result.ok and not args.quiet:
        for message in result.errors:
            print(f"  {message}", file=sys.stderr)
    return 0 if result.ok else 1


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point for structbind commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(2)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "bind":
        sys.exit(_run_bind(args))


if __name__ == "__main__":
    main()
