"""CLI entrypoints for smartdocs commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

from . import __version__
from .errors import ConfigError, InvalidArgumentError
from .logging import configure_logging
from .operations import DocsService
from .requests import AnalysisRequest, parse_request

_REPORT_COMMANDS = ("analyze", "docs", "missing", "suggest")


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


def _add_analysis_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the codebase root (defaults to current directory).",
    )
    parser.add_argument(
        "--max-files",
        type=int,
        default=None,
        help="Stop after analyzing this many files (1-5000).",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Glob-like pattern for absolute paths to skip; may be repeated.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Analyze files on this many threads (defaults to the config value or 1).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartdocs",
        description="Find undocumented functions, classes and methods in a codebase.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Summarize documentation coverage for a codebase.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_analysis_options(analyze_parser)
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full analysis result as JSON.",
    )

    docs_parser = subparsers.add_parser(
        "docs",
        help="Generate the full markdown documentation report.",
    )
    _add_verbose_option(docs_parser, suppress_default=True)
    _add_analysis_options(docs_parser)

    missing_parser = subparsers.add_parser(
        "missing",
        help="List undocumented entities grouped by severity.",
    )
    _add_verbose_option(missing_parser, suppress_default=True)
    _add_analysis_options(missing_parser)

    suggest_parser = subparsers.add_parser(
        "suggest",
        help="Suggest prioritized documentation improvements.",
    )
    _add_verbose_option(suggest_parser, suppress_default=True)
    _add_analysis_options(suggest_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    mcp_parser = subparsers.add_parser(
        "mcp",
        help="Run the stdio JSON-RPC tool server.",
    )
    _add_verbose_option(mcp_parser, suppress_default=True)

    return parser


def _request_from_args(args: argparse.Namespace) -> AnalysisRequest:
    payload: Dict[str, object] = {"rootPath": args.path}
    if args.max_files is not None:
        payload["maxFiles"] = args.max_files
    patterns: List[str] = list(args.exclude or [])
    if patterns:
        payload["excludePatterns"] = patterns
    return parse_request(payload)


def _render(service: DocsService, args: argparse.Namespace, request: AnalysisRequest) -> str:
    if args.command == "analyze":
        result, text = service.analyze(request)
        if args.json:
            return json.dumps(result.to_dict(), indent=2, ensure_ascii=False) + "\n"
        return text
    if args.command == "docs":
        return service.generate_documentation(request)
    if args.command == "missing":
        return service.detect_missing_docs(request)
    return service.suggest_improvements(request)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for smartdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
        return
    if args.command == "mcp":  # pragma: no cover - integration path
        from .mcp import serve_stdio

        serve_stdio()
        return
    if args.command not in _REPORT_COMMANDS:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    try:
        request = _request_from_args(args)
        output = _render(DocsService(workers=args.workers), args, request)
    except InvalidArgumentError as exc:
        parser.exit(2, f"{exc}\n")
    except (FileNotFoundError, NotADirectoryError, ConfigError) as exc:
        parser.exit(1, f"{exc}\n")
    except Exception as exc:  # pragma: no cover - unexpected failure
        parser.exit(1, f"smartdocs {args.command} failed: {exc}\nRun with --verbose for more details.\n")

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output, encoding="utf-8")
        print(f"Report written to {_relativize(args.output)}")
    else:
        sys.stdout.write(output)


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
