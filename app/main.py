"""poeditor-pull command line entry point."""

import argparse
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from infrastructure.configuration import settings
from infrastructure.logging import configure_logging, get_module_logger
from integrations.poeditor import PoEditorClient
from modules.export import ExportPipeline, PoEditorError, load_configuration

logger = get_module_logger()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="poeditor-pull",
        description="Export POEditor translations into string-resource files.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the export configuration "
        f"(default: $POEDITOR_CONFIG_PATH or {settings.poeditor.POEDITOR_CONFIG_PATH})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("pull", help="Download translations and overwrite local files")
    return parser.parse_args(argv)


def pull(config_path: str) -> int:
    """Run a pull and return the process exit code."""
    try:
        configuration = load_configuration(config_path)
        logger.info(
            "export_configuration",
            config_path=config_path,
            configuration=configuration.describe(),
        )
        client = PoEditorClient(
            api_key=configuration.api_key,
            project_id=configuration.project_id,
        )
        report = ExportPipeline(configuration, client).pull()
    except PoEditorError as e:
        logger.error("pull_failed", error=str(e))
        return 1

    logger.info(
        "pull_summary",
        saved=len(report.saved),
        skipped=[result.message for result in report.skipped],
    )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function of the command line tool."""
    load_dotenv()
    args = parse_args(argv)
    configure_logging(log_level=args.log_level)

    config_path = args.config or settings.poeditor.POEDITOR_CONFIG_PATH
    if args.command == "pull":
        return pull(config_path)
    return 2


if __name__ == "__main__":
    sys.exit(main())
