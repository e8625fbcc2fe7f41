from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides understood by
``vexplorer.domain.config``.
"""

import argparse
from typing import Any, Dict

from vexplorer.domain.constants import APP_VERSION
from vexplorer.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the VExplorer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="vexplorer",
        description=i18n.t("app.description"),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # --- Session Bootstrap ---
    p.add_argument(
        "-i", "--import",
        dest="import_path",
        default=None,
        help=i18n.t("cli.args.import"),
    )
    p.add_argument(
        "--empty",
        action="store_true",
        help=i18n.t("cli.args.empty"),
    )
    p.add_argument(
        "--ext",
        dest="default_extension",
        default=None,
        help=i18n.t("cli.args.extension"),
    )

    # --- Persistence Targets ---
    p.add_argument(
        "-s", "--storage",
        dest="storage_dir",
        default=None,
        help=i18n.t("cli.args.storage"),
    )
    p.add_argument(
        "--hierarchy",
        dest="hierarchy_file",
        default=None,
        help=i18n.t("cli.args.hierarchy"),
    )
    p.add_argument(
        "--no-save",
        action="store_true",
        help=i18n.t("cli.args.no_save"),
    )

    # --- Non-interactive Execution ---
    p.add_argument(
        "-c", "--command",
        dest="commands",
        action="append",
        default=None,
        help=i18n.t("cli.args.command"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save_config"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration overrides subset.

    Values left at None mean "not provided" and are ignored by the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides.
    """
    overrides: Dict[str, Any] = {
        "import_path": args.import_path,
        "storage_dir": args.storage_dir,
        "hierarchy_file": args.hierarchy_file,
        "log_file": args.log_file,
        "default_extension": _normalize_extension(args.default_extension),
    }

    if args.empty:
        overrides["load_sample"] = False
    if args.no_save:
        overrides["save_on_exit"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _normalize_extension(value: Any) -> Any:
    """Ensure a user supplied extension carries its leading dot."""
    if value is None:
        return None
    ext = str(value).strip()
    if not ext:
        return None
    return ext if ext.startswith(".") else f".{ext}"
