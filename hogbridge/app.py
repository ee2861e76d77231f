from __future__ import annotations

import argparse
from dataclasses import dataclass
import sys

from PySide6.QtWidgets import QApplication

from core.config import AppConfig
from core.logging import setup_logging
from core.migration.migration_models import Direction, parse_direction_token
from core.paths import APP_NAME, ensure_runtime_directories
from i18n.i18n import initialize_i18n, tr
from ui.main_window import MainWindow


@dataclass(slots=True)
class LaunchOptions:
    direction: Direction | None = None
    source: str | None = None
    rejected_direction: str | None = None
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hogbridge",
        description="Convert Hogwarts Legacy saves between GamePass (WGS) and Steam.",
    )
    parser.add_argument(
        "-d",
        "--direction",
        help="Preselected direction: gp2steam (gptosteam, gp-steam) or steam2gp (steamtogp, steam-gp).",
    )
    parser.add_argument(
        "-p",
        "--path",
        help="Preselected source save folder for the chosen direction.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write debug records to the log file and stderr.",
    )
    return parser


def parse_arguments(argv: list[str] | None = None) -> LaunchOptions:
    # Qt consumes its own switches, unknown ones are left alone.
    args, _unknown = build_parser().parse_known_args(argv)
    direction = parse_direction_token(args.direction) if args.direction else None
    return LaunchOptions(
        direction=direction,
        source=args.path.strip() if args.path and args.path.strip() else None,
        rejected_direction=args.direction if args.direction and direction is None else None,
        verbose=args.verbose,
    )


def main(argv: list[str] | None = None) -> int:
    arguments = sys.argv[1:] if argv is None else argv
    options = parse_arguments(arguments)

    ensure_runtime_directories()

    app = QApplication([sys.argv[0], *arguments])
    app.setApplicationName(APP_NAME)

    config = AppConfig()
    initialize_i18n(config.get_language())

    logger, log_emitter = setup_logging(verbose=options.verbose)
    if options.rejected_direction is not None:
        logger.warning("Ignoring unknown direction argument: %s", options.rejected_direction)

    window = MainWindow(
        config=config,
        logger=logger,
        log_emitter=log_emitter,
        initial_direction=options.direction,
        initial_source=options.source,
    )
    window.show()

    logger.info(tr("startup.ready"))
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
