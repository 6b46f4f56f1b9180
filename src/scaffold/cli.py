# src/scaffold/cli.py

import argparse
import json
import re
import sys
from difflib import get_close_matches
from pathlib import Path
from typing import NoReturn

from .build import ModuleResult, run_configuration
from .config import (
    RootConfigResolved,
    load_and_validate_config,
    resolve_config,
)
from .constants import DEFAULT_ACTIVE_VARIANT
from .logs import getAppLogger
from .meta import DESCRIPTION, PROGRAM_DISPLAY, PROGRAM_SCRIPT, get_metadata
from .prune import GraphPruner


LEVEL_ORDER = ["trace", "debug", "info", "warning", "error", "critical", "silent"]


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    """Parser that maps property-style options back to the flag they meant.

    ``--debugOnly``, ``--app.enableIos`` and ``--no-debugOnly`` all point
    at a real option once camelCase and the ``app.`` prefix are undone.
    """

    def _suggest_option(self, arg: str) -> str | None:
        known_opts = [s for action in self._actions for s in action.option_strings]
        opt = arg.partition("=")[0]
        negated = opt.startswith("--no-")
        name = opt.removeprefix("--no-") if negated else opt.lstrip("-")
        name = name.removeprefix("app.")
        kebab = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "-", name).lower()
        candidate = f"--{'no-' if negated else ''}{kebab}"
        if candidate in known_opts:
            return candidate
        close = get_close_matches(candidate, known_opts, n=1, cutoff=0.6)
        return close[0] if close else None

    def error(self, message: str) -> NoReturn:
        hint_lines: list[str] = []
        # "unrecognized arguments: --debugOnly ..."
        if "unrecognized arguments:" in message:
            bad = message.split("unrecognized arguments:", 1)[1].split()
            for arg in (tok for tok in bad if tok.startswith("-")):
                suggestion = self._suggest_option(arg)
                if suggestion:
                    hint_lines.append(f"Hint: did you mean {suggestion}?")

        self.print_usage(sys.stderr)
        full = f"{self.prog}: error: {message}"
        if hint_lines:
            full += "\n" + "\n".join(hint_lines)
        self.exit(2, full + "\n")


def _module_path(value: str) -> str:
    """argparse type for --module: paths are colon-delimited."""
    path = value.strip()
    if not path.startswith(":"):
        xmsg = f"module paths start with ':' (did you mean ':{path}'?)"
        raise argparse.ArgumentTypeError(xmsg)
    return path


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(prog=PROGRAM_SCRIPT, description=DESCRIPTION)

    parser.add_argument("-c", "--config", help="Path to the project layout file.")
    parser.add_argument(
        "--properties",
        nargs="+",
        metavar="FILE",
        help="Additional property files (relative to cwd). Override config files.",
    )
    parser.add_argument(
        "--module",
        action="append",
        type=_module_path,
        metavar="PATH",
        help="Only configure this module path (repeatable), e.g. ':data:api-client'.",
    )
    parser.add_argument(
        "--active-variant",
        default=None,
        help=f"Variant kept by per-variant rules (default: {DEFAULT_ACTIVE_VARIANT}).",
    )

    # --- Flags ---
    parser.add_argument(
        "--debug-only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override app.debugOnly.",
    )
    parser.add_argument(
        "--enable-ios",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override app.enableIos.",
    )
    parser.add_argument(
        "--ide-sync",
        action="store_true",
        default=None,
        help="Behave as during an IDE sync: configure but never prune.",
    )
    parser.add_argument(
        "--strict-config",
        action="store_true",
        default=None,
        help="Treat unknown config keys as errors.",
    )

    # --- Output ---
    parser.add_argument(
        "--json", action="store_true", help="Print the report as JSON."
    )
    parser.add_argument("--version", action="store_true", help="Show version info.")

    log_level = parser.add_mutually_exclusive_group()
    log_level.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const="warning",
        dest="log_level",
        help="Suppress non-critical output (same as --log-level warning).",
    )
    log_level.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Verbose output (same as --log-level debug).",
    )
    log_level.add_argument(
        "--log-level",
        choices=LEVEL_ORDER,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )
    return parser


def _load_and_resolve_config(args: argparse.Namespace) -> RootConfigResolved:
    logger = getAppLogger()
    cwd = Path.cwd().resolve()

    loaded = load_and_validate_config(args, cwd)
    if loaded is None:
        xmsg = (
            f"No project layout found. Create .{PROGRAM_SCRIPT}.toml or pass --config."
        )
        raise FileNotFoundError(xmsg)

    config_path, root_cfg, _summary = loaded
    # keep stdout parseable in --json mode
    notice = logger.debug if args.json else logger.info
    notice("🔧 Using config: %s", config_path.name)
    return resolve_config(root_cfg, args, config_path.parent, cwd, config_path)


def _format_text(results: list[ModuleResult], resolved: RootConfigResolved) -> str:
    lines = [
        f"debugOnly={str(resolved['debug_only']['value']).lower()}"
        f" ({resolved['debug_only']['origin']}), "
        f"enableIos={str(resolved['enable_ios']['value']).lower()}"
        f" ({resolved['enable_ios']['origin']})",
    ]
    for result in results:
        project = result.project
        report = result.report
        header = f"{project.path} [{project.kind.value}]"
        if project.namespace:
            header += f" → {project.namespace}"
        lines.append(header)
        if report.skipped:
            lines.append("  pruning skipped (IDE sync)")
            continue
        for name in report.matched:
            lines.append(f"  - {name}")
        lines.append(
            f"  {report.matched_count} of {report.expanded_count} planned task(s)"
            " disabled"
        )
    return "\n".join(lines)


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(argv: list[str] | None = None) -> int:
    logger = getAppLogger()

    try:
        parser = _setup_parser()
        args = parser.parse_args(argv)

        if args.version:
            print(f"{PROGRAM_DISPLAY} {get_metadata()}")
            return 0

        if args.log_level:
            logger.setLevel(args.log_level.upper())

        resolved = _load_and_resolve_config(args)
        pruner = GraphPruner(sync_active=args.ide_sync)
        results = run_configuration(resolved, pruner)

        if args.json:
            payload = {
                "debug_only": resolved["debug_only"],
                "enable_ios": resolved["enable_ios"],
                "active_variant": resolved["active_variant"],
                "modules": [r.as_dict() for r in results],
            }
            print(json.dumps(payload, indent=2))
        else:
            print(_format_text(results, resolved))

    except (FileNotFoundError, ValueError, TypeError, RuntimeError) as e:
        # controlled termination
        logger.error(str(e))  # noqa: TRY400
        return getattr(e, "code", 1)

    except Exception as e:  # noqa: BLE001
        logger.critical("Unexpected internal error: %s", e)
        return getattr(e, "code", 1)

    else:
        return 0
