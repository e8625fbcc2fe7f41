from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the session lifecycle: argument parsing, loading and merging
of configuration sources (defaults, persisted file and CLI overrides),
logging bootstrap, construction of the virtual tree and the explorer,
and finally the interactive (or scripted) command loop.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from vexplorer.core.explorer import Explorer
from vexplorer.core.scanner import scan_directory
from vexplorer.core.seed import build_sample_tree
from vexplorer.core.tree import VirtualTree
from vexplorer.domain.config import get_default_config, load_config, merge_config, save_config
from vexplorer.domain.interaction_models import AutoPrompter, Prompter
from vexplorer.infra.fs import normalize_path
from vexplorer.infra.logging import LoggingConfig, configure_logging, get_logger
from vexplorer.interface.cli import args as cli_args
from vexplorer.interface.shell.console import ConsolePrompter, ExplorerShell, make_line_reader
from vexplorer.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad input, 130 interrupted).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration hierarchy (defaults / persisted / overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    conf = merge_config(base_conf, cli_args.args_to_overrides(args))

    # 3. Logging bootstrap
    configure_logging(LoggingConfig(
        level=conf.get("log_level", "INFO"),
        console=True,
        log_file=conf.get("log_file") or None,
    ))
    logger.debug("CLI execution initiated.")

    locale = conf.get("locale") or i18n.locale
    if locale != i18n.locale:
        i18n.load_locale(locale)

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config and save_config(conf):
        print(i18n.t("cli.status.config_saved"))

    # 4. Virtual tree bootstrap
    import_path = conf.get("import_path") or ""
    if import_path and not os.path.isdir(import_path):
        msg = i18n.t("cli.errors.path_not_exist", path=import_path)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    tree = _build_tree(conf)

    # 5. Session execution
    commands = args.commands or []
    prompter: Prompter = AutoPrompter() if commands else ConsolePrompter(make_line_reader(None, sys.stdout))
    explorer = Explorer(
        tree=tree,
        prompter=prompter,
        default_extension=conf["default_extension"],
        recognized_extensions=conf.get("recognized_extensions") or [],
    )
    shell = ExplorerShell(
        explorer,
        storage_dir=normalize_path(conf.get("storage_dir"), fallback=os.getcwd()),
        hierarchy_path=normalize_path(conf.get("hierarchy_file"), fallback="hierarchy.txt"),
        save_on_exit=bool(conf.get("save_on_exit", True)),
    )

    try:
        if commands:
            shell.run_script(commands)
        else:
            shell.cmdloop()
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    return 0 if shell.save_ok else 1

# -----------------------------------------------------------------------------
# SESSION HELPERS
# -----------------------------------------------------------------------------

def _build_tree(conf: Dict[str, Any]) -> VirtualTree:
    """Create the starting tree: imported directory, sample layout or empty root."""
    import_path = conf.get("import_path") or ""
    if import_path:
        return scan_directory(import_path, default_extension=conf["default_extension"])
    if conf.get("load_sample", True):
        return build_sample_tree()
    return VirtualTree()

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
