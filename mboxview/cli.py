"""Command-line front door for mboxview.

Parses CLI options, merges them with the config file, and loads the
mailbox. Then dispatches into the interactive viewer runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .errors import MboxViewError
from .logs import configure_logging
from .mailstore import load_store
from .runtime import run_viewer
from .runtime.config import load_viewer_config
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mboxview",
        usage="%(prog)s [options] PATH",
        description=(
            "Browse an mbox archive in a two-pane terminal viewer with thread navigation. "
            "PATH is the only required argument; every option below is optional."
        ),
    )
    parser.add_argument("path", metavar="PATH", help="Path to the mbox file.")
    parser.add_argument("--style", default=None, help="Pygments style name for message text.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--nopager", action="store_true", help="Print all messages instead of opening the viewer.")
    parser.add_argument("--log-file", type=Path, default=None, help="Append debug/info logs to this file.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the viewer on one mailbox file.

    Startup failures exit with a one-line diagnostic before the terminal is
    switched into raw mode.
    """
    args = build_parser().parse_args(argv)
    config = load_viewer_config()
    configure_logging(args.log_file or config.log_file, config.log_level)

    path = Path(args.path)
    try:
        store = load_store(path)
    except MboxViewError as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(f"mboxview: {exc}") from exc

    try:
        run_viewer(
            store,
            path,
            args.style or config.style,
            args.no_color,
            args.nopager,
            args.theme or config.theme,
        )
    except OSError as exc:
        logger.exception("terminal I/O failed")
        raise SystemExit(f"mboxview: terminal error: {exc}") from exc


if __name__ == "__main__":
    main()
