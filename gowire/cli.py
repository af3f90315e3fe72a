"""CLI entrypoints for gowire commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DIAGRAM_FORMATS, DIAGRAM_TYPES, ConfigError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .project import ProjectError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the Go project root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gowire",
        description="Discover Clean-Architecture domains in a Go project and generate wiring and diagrams.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    wire_parser = subparsers.add_parser(
        "wire",
        help="Auto-wire dependencies and generate main.go and wire.go.",
    )
    _add_verbose_option(wire_parser, suppress_default=True)
    _add_path_argument(wire_parser)
    wire_parser.add_argument(
        "--output",
        default=None,
        help="Output directory for main.go and wire.go (default: cmd/api).",
    )

    describe_parser = subparsers.add_parser(
        "describe",
        help="Generate architecture diagrams for the project.",
    )
    _add_verbose_option(describe_parser, suppress_default=True)
    _add_path_argument(describe_parser)
    describe_parser.add_argument(
        "--format",
        choices=DIAGRAM_FORMATS,
        default=None,
        help="Diagram format (default: mermaid).",
    )
    describe_parser.add_argument(
        "--type",
        choices=DIAGRAM_TYPES,
        default=None,
        help="Diagram type (default: all).",
    )
    describe_parser.add_argument(
        "--output",
        default=None,
        help="Write the diagram to this file instead of printing it.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run gowire as an HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for gowire commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    orchestrator = Orchestrator()

    if args.command == "wire":
        try:
            files = orchestrator.run_wire(args.path, output_dir=args.output)
        except (ProjectError, ConfigError, FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"gowire wire failed: {exc}\n")
        except OSError as exc:
            parser.exit(1, f"gowire wire failed to write output: {exc}\n")
        print("Generated files:")
        for file_path in files:
            print(f"  ✓ {_relativize(file_path)}")
        print("\nNext steps:")
        print("  1. Review generated main.go and wire.go")
        print("  2. Set DATABASE_URL in .env")
        print("  3. Run: go run ./cmd/api")
    elif args.command == "describe":
        try:
            diagram = orchestrator.run_describe(
                args.path,
                fmt=args.format,
                kind=args.type,
                output=args.output,
            )
        except (ConfigError, FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"gowire describe failed: {exc}\n")
        except OSError as exc:
            parser.exit(1, f"gowire describe failed to write output: {exc}\n")
        if args.output:
            print(f"Architecture diagram saved to {_relativize(Path(args.output))}")
        else:
            print(diagram)
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
