from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Resolves the styling configuration (defaults, saved settings, CLI
overrides), renders the styled tree preview and prints or writes the
requested artifact.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from rainbowtree.core.services.preview import render_preview, save_preview
from rainbowtree.core.validator import validate_config
from rainbowtree.domain.config import get_default_config, load_config, save_config
from rainbowtree.domain.preview_models import PreviewResult
from rainbowtree.infra.fs import normalize_path
from rainbowtree.infra.logging import LoggingConfig, configure_logging, get_logger
from rainbowtree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on failure, 2 if the input directory is missing,
             130 when interrupted.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "INFO", console=True))
    logger.debug("CLI execution initiated. Resolving configuration...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    config, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(config)
        logger.info("Settings saved.")

    if args.dump_config:
        print(json.dumps(config, ensure_ascii=False, indent=2))
        return 0

    input_path = normalize_path(args.input_path, os.getcwd())
    if not os.path.isdir(input_path):
        msg = f"Input directory does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    exclude = cli_args._split_csv(args.exclude_patterns)
    try:
        result = render_preview(
            input_path,
            args.open_paths,
            config,
            exclude_patterns=exclude,
            respect_gitignore=args.gitignore,
        )
        if result.ok and args.output_path and not (args.css_only or args.focused_only):
            result = save_preview(result, args.output_path)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        logger.critical(f"Preview rendering failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 1

    _print_result(result, args)
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_result(result: PreviewResult, args: Any) -> None:
    if args.json_output:
        payload = asdict(result)
        payload.pop("html")
        if not args.css_only:
            payload.pop("stylesheet")
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if args.css_only:
        sys.stdout.write(result.stylesheet)
        return

    if args.focused_only:
        for path in result.focused_paths:
            print(path)
        return

    if result.output_path:
        print(f"Preview written to: {result.output_path}")
        print(f"Entries: {result.element_count}  Focused: {len(result.focused_paths)}")
        for path in result.missing_paths:
            print(f"  - not found: {path}")
        return

    sys.stdout.write(result.html)


if __name__ == "__main__":
    sys.exit(main())
