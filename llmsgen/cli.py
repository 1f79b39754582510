"""CLI entrypoints for llmsgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator
from .processor import ProcessingError


_VERBOSITY_FLAGS = (
    ("-v", "--verbose", "verbose", "Log every processed file (DEBUG)."),
    ("-q", "--quiet", "quiet", "Only log warnings such as output collisions."),
)


def _add_verbosity_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    # Subcommands suppress defaults so flags given before the subcommand survive.
    group = parser.add_mutually_exclusive_group()
    for short, long, dest, help_text in _VERBOSITY_FLAGS:
        group.add_argument(
            short,
            long,
            dest=dest,
            action="store_true",
            default=argparse.SUPPRESS if suppress_default else False,
            help=help_text,
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llmsgen",
        description="Export MD/MDX content as plain Markdown and an llms.txt index.",
    )
    _add_verbosity_options(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Regenerate md/ and llms.txt from a content directory.",
    )
    _add_verbosity_options(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "content_dir",
        nargs="?",
        default=None,
        help="Directory holding .md/.mdx sources (may come from the config file).",
    )
    generate_parser.add_argument(
        "output_dir",
        nargs="?",
        default=None,
        help="Directory receiving llms.txt and md/ (may come from the config file).",
    )
    generate_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to a {CONFIG_FILENAME} file or the directory containing it.",
    )
    generate_parser.add_argument("--base-url", default=None, help="Prefix for every link in llms.txt.")
    generate_parser.add_argument("--project-name", default=None, help="Heading of llms.txt.")
    generate_parser.add_argument(
        "--project-description", default=None, help="Quoted summary under the heading."
    )
    generate_parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Additional exclusion pattern (repeatable), e.g. 'drafts/' or '*.wip.md'.",
    )

    return parser


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "content_dir": args.content_dir,
        "output_dir": args.output_dir,
        "base_url": args.base_url,
        "project_name": args.project_name,
        "project_description": args.project_description,
        "exclude_paths": args.exclude,
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for llmsgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file)

    if args.command == "generate":
        config_path = args.config if args.config is not None else Path.cwd()
        try:
            config = load_config(config_path, _overrides_from_args(args))
        except ConfigError as exc:
            parser.exit(1, f"Invalid configuration: {exc}\n")

        try:
            result = Orchestrator().run(config)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except (ProcessingError, OSError) as exc:
            get_logger("cli").debug("Generation aborted", exc_info=True)
            parser.exit(1, f"llmsgen generate failed: {exc}\nRun with --verbose for more details.\n")
        print(f"Generated {len(result.manifest)} documents; index at {_relativize(result.index_path)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
