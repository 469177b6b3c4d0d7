"""Display management for CLI interface."""

from musicmeta.ui.cli.display.result import MetadataDisplay, metadata_to_dict

__all__ = ["MetadataDisplay", "metadata_to_dict"]
