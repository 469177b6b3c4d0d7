"""Command line interface for musicmeta."""

import asyncio
import sys
from typing import final

import requests
from mutagen import MutagenError

from musicmeta.api import parse_file, parse_url
from musicmeta.config.config import Config
from musicmeta.config.paths import default_config_path
from musicmeta.platform.logging import logger
from musicmeta.shared.errors import MusicMetadataError
from musicmeta.shared.models import AudioMetadata
from musicmeta.shared.options import ParseOptions
from musicmeta.ui.cli.args import ArgumentParser
from musicmeta.ui.cli.args.options import CLIArgs, InitConfigArgs, ParseArgs
from musicmeta.ui.cli.display import MetadataDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, InitConfigArgs):
                CommandProcessor._init_config(args)
                return

            assert isinstance(args, ParseArgs)
            metadata = asyncio.run(CommandProcessor._parse(args))
            if args.quiet:
                return
            display = MetadataDisplay()
            if args.json:
                display.show_json(metadata)
            else:
                display.show_tables(metadata, args.source)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except FileNotFoundError as e:
            logger.error("File not found: %s", e.filename or e)
            sys.exit(1)
        except (MusicMetadataError, MutagenError, OSError, requests.RequestException) as e:
            logger.error("Failed to read metadata: %s", str(e))
            sys.exit(1)

    @staticmethod
    async def _parse(args: ParseArgs) -> AudioMetadata:
        options = ParseOptions.from_config(content_type=args.content_type)
        if args.native:
            options.native = True
        if args.merge:
            options.merge_tag_headers = True
        if args.skip_covers:
            options.skip_covers = True

        if args.is_url:
            return await parse_url(args.source, options)
        return await parse_file(args.source, options)

    @staticmethod
    def _init_config(args: InitConfigArgs) -> None:
        target = default_config_path()
        if target.exists() and not args.force:
            logger.error("Configuration already exists at %s (use --force to overwrite)", target)
            sys.exit(1)
        _ = Config().save(target)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
