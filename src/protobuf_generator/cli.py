#!/usr/bin/env python3
"""
protobuf-generator CLI
======================

Run the protobuf code generator outside of an IDE.

Examples:
    # Generate Person.cs next to Person.proto
    protobuf-generator generate protos/Person.proto --namespace "MyApp.Model"

    # Extra package directives after the first namespace segment
    protobuf-generator generate Person.proto --namespace "MyApp.Model;ProtoBuf;Shared"

    # Show where protogen is expected and whether it's there
    protobuf-generator check --project-dir my-app
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from protobuf_generator.core.tool_config import CONFIG_FILE_NAME, ToolConfig, resolve_tool_config
from protobuf_generator.generators import available_generators, generator_for_path, get_generator
from protobuf_generator.host import FileSystemHost
from protobuf_generator.logging_config import setup_logging

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _resolve_config(project_dir: Optional[str], protogen: Optional[str]) -> ToolConfig:
    cfg = resolve_tool_config(Path(project_dir) if project_dir else None)
    if protogen:
        cfg = replace(cfg, protogen_path=Path(protogen).expanduser().resolve())
    return cfg


def cmd_generate(args: argparse.Namespace) -> int:
    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Input file not found: {input_path}", file=sys.stderr)
        return EXIT_USAGE

    project_dir = args.project_dir or str(input_path.resolve().parent)
    cfg = _resolve_config(project_dir, args.protogen)

    if args.kind:
        try:
            generator = get_generator(args.kind, cfg)
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return EXIT_USAGE
    else:
        generator = generator_for_path(input_path, cfg)
        if generator is None:
            print(
                f"No generator handles '{input_path.suffix}' files "
                f"(use --kind; available: {', '.join(available_generators())})",
                file=sys.stderr,
            )
            return EXIT_USAGE

    host = FileSystemHost()
    try:
        out_path = host.generate_file(generator, input_path, cfg, namespace_spec=args.namespace)
    except OSError as e:
        print(f"Cannot read or write {input_path}: {e}", file=sys.stderr)
        return EXIT_USAGE

    for d in host.diagnostics:
        print(f"{input_path}({d.line},{d.column}): {d.severity}: {d.message}", file=sys.stderr)

    if out_path is None:
        return EXIT_FAILED

    print(out_path)
    return EXIT_OK


def cmd_check(args: argparse.Namespace) -> int:
    cfg = _resolve_config(args.project_dir, args.protogen)
    found = cfg.protogen_path.is_file()

    print(f"protogen:   {cfg.protogen_path} ({'found' if found else 'MISSING'})")
    print(f"language:   {cfg.target_language}")
    print(f"extension:  {cfg.file_extension}")
    print(f"reference:  {cfg.reference_name} ({cfg.reference_path})")
    if args.project_dir:
        config_file = Path(args.project_dir) / CONFIG_FILE_NAME
        print(f"config:     {config_file} ({'present' if config_file.exists() else 'not present'})")

    return EXIT_OK if found else EXIT_FAILED


def _logging_options(default) -> argparse.ArgumentParser:
    # SUPPRESS on subcommands keeps a value given before the subcommand from being reset.
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False if default is None else default,
        help="Show debug logging on the console",
    )
    options.add_argument(
        "--log-dir",
        type=str,
        default=default,
        help="Also write a rotating debug log into this directory",
    )
    return options


def build_parser() -> argparse.ArgumentParser:
    subcommand_options = _logging_options(argparse.SUPPRESS)

    parser = argparse.ArgumentParser(
        prog="protobuf-generator",
        description="Generate source code from .proto files via protogen",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  protobuf-generator generate Person.proto --namespace "MyApp.Model"
  protobuf-generator check --project-dir my-app

For more help on a specific command:
  protobuf-generator generate --help
        """,
        parents=[_logging_options(None)],
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    generate_parser = subparsers.add_parser(
        "generate",
        parents=[subcommand_options],
        help="Generate a source file from a .proto file",
    )
    generate_parser.add_argument("input", type=str, help="Path to the .proto file")
    generate_parser.add_argument(
        "--namespace",
        type=str,
        default=None,
        help="Semicolon-separated namespace: first segment is the namespace, the rest are packages",
    )
    generate_parser.add_argument(
        "--kind",
        type=str,
        default=None,
        help="Generator kind (default: chosen from the input file extension)",
    )
    generate_parser.add_argument(
        "--project-dir",
        type=str,
        default=None,
        help=f"Directory holding {CONFIG_FILE_NAME} (default: the input file's directory)",
    )
    generate_parser.add_argument(
        "--protogen",
        type=str,
        default=None,
        help="Path to the protogen executable (overrides config and environment)",
    )
    generate_parser.set_defaults(handler=cmd_generate)

    check_parser = subparsers.add_parser(
        "check",
        parents=[subcommand_options],
        help="Show the resolved tool configuration and whether protogen is installed",
    )
    check_parser.add_argument(
        "--project-dir",
        type=str,
        default=None,
        help=f"Directory holding {CONFIG_FILE_NAME}",
    )
    check_parser.add_argument(
        "--protogen",
        type=str,
        default=None,
        help="Path to the protogen executable (overrides config and environment)",
    )
    check_parser.set_defaults(handler=cmd_check)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "handler", None):
        parser.print_help()
        return EXIT_USAGE

    setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        console_level=logging.DEBUG if args.verbose else logging.INFO,
    )

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
