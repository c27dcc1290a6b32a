"""CLI entrypoints for marketsync commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List

from .config import CONFIG_FILENAME, load_config, read_action_inputs
from .context import ReleaseContext
from .errors import ConfigError
from .logging import configure_logging
from .orchestrator import SubmissionPipeline
from .outputs import default_output_sink

_OVERRIDE_FLAGS = (
    ("name", "Listing name."),
    ("version", "Listing version (defaults to the manifest or release tag)."),
    ("description", "Short description."),
    ("long-description", "Long description shown on the listing page."),
    ("category", "Marketplace category (default: development)."),
    ("homepage", "Project homepage URL."),
    ("repository", "Source repository URL."),
    ("license", "License identifier (default: MIT)."),
    ("changelog", "Release notes for this version."),
    ("tags", "Comma-separated tags; replaces manifest keywords."),
    ("pricing", "Pricing model (default: free)."),
    ("min-near-version", "Minimum supported NEAR version."),
)


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


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to the project root (defaults to the project-path input or '.').",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a YAML config file (defaults to ./{CONFIG_FILENAME} when present).",
    )
    parser.add_argument("--marketplace-url", default=None, help="Marketplace API base URL.")
    parser.add_argument("--api-key", default=None, help="Marketplace API key.")
    parser.add_argument(
        "--fail-on-warning",
        action="store_const",
        const="true",
        default=None,
        help="Treat validation warnings as fatal.",
    )
    overrides = parser.add_argument_group("payload overrides")
    for flag, help_text in _OVERRIDE_FLAGS:
        overrides.add_argument(f"--{flag}", default=None, help=help_text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marketsync",
        description="Submit or update a marketplace listing from project manifests.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    submit_parser = subparsers.add_parser(
        "submit",
        help="Validate the listing and create or update it in the marketplace.",
    )
    _add_common_options(submit_parser)
    submit_parser.add_argument(
        "--dry-run",
        action="store_const",
        const="true",
        default=None,
        help="Validate and print the summary without submitting.",
    )
    submit_parser.add_argument(
        "--no-update-existing",
        dest="update_existing",
        action="store_const",
        const="false",
        default=None,
        help="Always create a new listing instead of updating one with the same name.",
    )
    submit_parser.add_argument(
        "--request-timeout",
        default=None,
        help="Per-request timeout in seconds (default: 30).",
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate the listing payload without contacting the marketplace.",
    )
    _add_common_options(validate_parser)

    return parser


def _cli_inputs(args: argparse.Namespace) -> Dict[str, str]:
    values: Dict[str, object] = {
        "project-path": args.path,
        "marketplace-url": args.marketplace_url,
        "api-key": args.api_key,
        "fail-on-warning": args.fail_on_warning,
        "dry-run": getattr(args, "dry_run", None),
        "update-existing": getattr(args, "update_existing", None),
        "request-timeout": getattr(args, "request_timeout", None),
    }
    if args.command == "validate":
        values["validate-only"] = "true"
    for flag, _ in _OVERRIDE_FLAGS:
        values[flag] = getattr(args, flag.replace("-", "_"))
    return {key: str(value) for key, value in values.items() if value is not None}


def main(argv: List[str] | None = None) -> None:
    """CLI entrypoint for marketsync commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))
    sink = default_output_sink()

    inputs = read_action_inputs()
    inputs.update(_cli_inputs(args))

    if args.config is not None:
        config_file = Path(args.config)
        if not config_file.exists():
            sink.set_output("status", "error")
            parser.exit(1, f"Config file not found: {config_file}\n")
    else:
        config_file = Path.cwd() / CONFIG_FILENAME

    try:
        config = load_config(inputs, config_file=config_file)
    except ConfigError as exc:
        sink.set_output("status", "error")
        parser.exit(1, f"marketsync {args.command} failed: {exc}\n")

    pipeline = SubmissionPipeline(sink=sink)
    try:
        outcome = pipeline.execute(config, ReleaseContext.from_env())
    except Exception as exc:  # pragma: no cover
        sink.set_output("status", "error")
        parser.exit(1, f"marketsync {args.command} failed: {exc}\nRun with --verbose for more details.\n")

    if outcome.failed:
        parser.exit(1, f"marketsync {args.command} failed: {outcome.error}\n")
    print(f"Listing status: {outcome.status}")


if __name__ == "__main__":
    main(sys.argv[1:])
