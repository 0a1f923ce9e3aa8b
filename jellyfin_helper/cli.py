from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .app import JellyfinHelperApp
from .commands import doctor as cmd_doctor
from .commands import featuring_artists as cmd_featuring_artists
from .commands import similar_artists as cmd_similar_artists
from .config import Settings, find_config

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


class WarningBufferHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.records: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
        except Exception:  # pragma: no cover
            msg = record.getMessage()
        self.records.append(msg)


def describe_error(exc: BaseException) -> str:
    """Flatten an exception chain into "outer -> inner -> root" for the terminal."""
    context: list[str] = []
    current = exc
    while True:
        nested = current.__cause__
        if nested is None and not current.__suppress_context__:
            nested = current.__context__
        if nested is None:
            break
        message = str(current)
        if message:
            context.append(message)
        current = nested
    root = str(current) or type(current).__name__
    return " -> ".join([*context, root])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Jellyfin music library helper")
    parser.add_argument("--config", type=Path, help="Path to config.yaml")
    parser.add_argument("--log-level", default="INFO", help="Python logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    similar_parser = subparsers.add_parser(
        "list-artists-with-similar-names",
        aliases=["similar-artists"],
        help="List artists whose names share a run of characters",
    )
    similar_parser.add_argument(
        "--min-common-length",
        type=int,
        default=None,
        help="Override similar_artist.min_common_length (values <= 0 fall back to 5)",
    )
    subparsers.add_parser(
        "find-featuring-artists",
        aliases=["featuring-artists"],
        help="List artists whose names contain feat./featuring/'vec markers, with their albums",
    )
    doctor_parser = subparsers.add_parser(
        "doctor", help="Run basic configuration checks"
    )
    doctor_parser.add_argument(
        "--online",
        action="store_true",
        help="Also contact the Jellyfin server",
    )
    return parser


def _configure_logging(level_name: str) -> WarningBufferHandler:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    color_handler = logging.StreamHandler()
    color_handler.setFormatter(ColorFormatter(LOG_FORMAT))
    root_logger.addHandler(color_handler)

    warn_buffer = WarningBufferHandler()
    warn_buffer.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(warn_buffer)
    return warn_buffer


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    warn_buffer = _configure_logging(args.log_level)

    try:
        settings = Settings.load(find_config(args.config))
        app = JellyfinHelperApp.create(settings)
        match args.command:
            case "list-artists-with-similar-names" | "similar-artists":
                cmd_similar_artists.run(
                    app.get_similar_artist_finder(
                        min_common_length=getattr(args, "min_common_length", None)
                    )
                )
            case "find-featuring-artists" | "featuring-artists":
                cmd_featuring_artists.run(app.get_featuring_artists_finder())
            case "doctor":
                report = cmd_doctor.run(
                    settings,
                    validate_online=getattr(args, "online", False),
                )
                for line in report.checks:
                    print(line)
                if not report.ok:
                    raise SystemExit(1)
            case _:
                parser.error("Unknown command")
    except (SystemExit, KeyboardInterrupt):
        raise
    except Exception as exc:
        logging.getLogger(__name__).debug("Command failed", exc_info=True)
        raise SystemExit(describe_error(exc)) from exc
    finally:
        if warn_buffer.records:
            print("\n\033[33mWarnings/Errors summary:\033[0m")
            for line in warn_buffer.records:
                print(f" - {line}")


if __name__ == "__main__":
    main()
