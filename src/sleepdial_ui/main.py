import argparse
from datetime import datetime
import logging

from sleepdial_ui.Init import Init
from sleepdial_ui.core.AppState import AppState


def main() -> None:
    parser = argparse.ArgumentParser(description="Circular time range selector")
    parser.add_argument(
        "--log",
        default="ERROR",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default is ERROR."
    )
    parser.add_argument(
        "--log-to-file",
        action="store_true",
        help="Save logs to txt file."
    )
    parser.add_argument(
        "--settings",
        default="settings.toml",
        help="Path to the settings file. Created with defaults if missing."
    )

    args, unknown = parser.parse_known_args()

    level_name = args.log.upper()
    level = getattr(logging, level_name, None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {args.log}")

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if args.log_to_file:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
        log_filename = f"{timestamp}.txt"
        handlers.append(logging.FileHandler(log_filename))

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=handlers
    )

    # Load settings from file, otherwise use default values if file not available
    settings = Init.settings(args.settings)
    state = AppState(settings)

    while state.running:
        if not state.handle_events():
            break

        state.render()
        state.tick()

    state.shutdown()


if __name__ == "__main__":
    main()
