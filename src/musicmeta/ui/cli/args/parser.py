"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from typing import final

from musicmeta.config.config import Config
from musicmeta.platform.logging import DEFAULT_LOG_FILE, console_level_for, logger, setup_logger
from musicmeta.ui.cli.args.options import CLIArgs, InitConfigArgs, ParseArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="musicmeta",
            description="musicmeta - Read audio tags and print one normalized metadata record.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        parse_parser = subparsers.add_parser(
            "parse",
            help="Parse an audio file or URL and print its metadata",
        )
        _ = parse_parser.add_argument(
            "source",
            type=str,
            help="Path to an audio file, or an http(s) URL",
            metavar="SOURCE",
        )
        _ = parse_parser.add_argument(
            "--content-type",
            type=str,
            help="MIME type or extension of the audio data",
            metavar="TYPE",
        )
        _ = parse_parser.add_argument(
            "--native",
            action="store_true",
            help="Also print the native tags of every tag format",
        )
        _ = parse_parser.add_argument(
            "--merge",
            action="store_true",
            help="Fill missing fields from lower priority tag formats",
        )
        _ = parse_parser.add_argument(
            "--skip-covers",
            action="store_true",
            help="Do not decode embedded pictures",
        )
        _ = parse_parser.add_argument(
            "--json",
            action="store_true",
            help="Print the result as JSON",
        )
        verbosity = parse_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show dispatch and mapping details",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write the default configuration file",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))
        log_level = console_level_for(verbose=is_verbose, quiet=is_quiet)

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "parse":
            return ParseArgs(
                command="parse",
                source=parsed_args.source,
                content_type=parsed_args.content_type,
                native=parsed_args.native,
                merge=parsed_args.merge,
                skip_covers=parsed_args.skip_covers,
                json=parsed_args.json,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "init-config":
            return InitConfigArgs(command="init-config", force=parsed_args.force)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
