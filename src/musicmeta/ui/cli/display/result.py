"""src/musicmeta/ui/cli/display/result.py
What: Render parsed metadata as rich tables or JSON.
Why: Keep console output formatting in one place for every source type.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, final

from rich.console import Console
from rich.table import Table

from musicmeta.features.normalization import order_tags, rating_to_stars
from musicmeta.shared.models import AudioMetadata, Picture, Rating, TrackNo


def _summarize(value: Any) -> Any:
    """Reduce values to JSON friendly shapes; binary data is summarized by size."""
    if isinstance(value, Picture):
        return {
            "format": value.format,
            "type": value.type,
            "description": value.description,
            "size": len(value.data),
        }
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    if isinstance(value, Rating):
        return {"rating": value.rating, "source": value.source, "stars": rating_to_stars(value.rating)}
    if isinstance(value, TrackNo):
        return {"no": value.no, "of": value.of}
    if isinstance(value, dict):
        return {str(key): _summarize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_summarize(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def metadata_to_dict(metadata: AudioMetadata) -> dict[str, Any]:
    """Plain ``dict`` view of a parse result."""

    audio_format = {
        name: _summarize(value)
        for name, value in dataclasses.asdict(metadata.format).items()
        if value is not None and value != []
    }
    result: dict[str, Any] = {
        "format": audio_format,
        "common": {name: _summarize(value) for name, value in metadata.common.to_dict().items()},
    }
    if metadata.native is not None:
        result["native"] = {
            str(tag_type): _summarize(order_tags(tags)) for tag_type, tags in metadata.native.items()
        }
    return result


def _titled_table(title: str, *, show_header: bool = True) -> Table:
    # Never narrower than its title, so the title stays on one line.
    return Table(title=title, show_header=show_header, min_width=len(title) + 4)


def _display_text(value: Any) -> str:
    if isinstance(value, TrackNo):
        if value.no is None:
            return "-"
        return f"{value.no}/{value.of}" if value.of is not None else str(value.no)
    if isinstance(value, Picture):
        return f"{value.format} ({len(value.data)} bytes)"
    if isinstance(value, Rating):
        return f"{rating_to_stars(value.rating)}/5" + (f" ({value.source})" if value.source else "")
    if isinstance(value, list):
        return "; ".join(_display_text(item) for item in value)
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    return str(value)


@final
class MetadataDisplay:
    """Handles metadata display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize metadata display."""
        self.console = console or Console()

    def show_json(self, metadata: AudioMetadata) -> None:
        """Print the result as indented JSON."""
        self.console.print_json(json.dumps(metadata_to_dict(metadata), ensure_ascii=False))

    def show_tables(self, metadata: AudioMetadata, source: str) -> None:
        """Print format, common and optionally native tags as tables.

        Args:
            metadata: Parse result.
            source: Path or URL shown in the table titles.
        """
        format_table = _titled_table(f"Format: {source}", show_header=False)
        format_table.add_column("Property", style="cyan")
        format_table.add_column("Value")
        for name, value in dataclasses.asdict(metadata.format).items():
            if value is None or value == []:
                continue
            if name == "tag_types":
                value = ", ".join(str(tag_type) for tag_type in value)
            format_table.add_row(name, _display_text(value))
        self.console.print(format_table)

        common_table = _titled_table("Common tags", show_header=False)
        common_table.add_column("Field", style="cyan")
        common_table.add_column("Value")
        for name, value in metadata.common.to_dict().items():
            common_table.add_row(name, _display_text(value))
        self.console.print(common_table)

        if metadata.native is None:
            return
        for tag_type, tags in metadata.native.items():
            native_table = _titled_table(f"Native tags: {tag_type}")
            native_table.add_column("Id", style="cyan")
            native_table.add_column("Value")
            for tag_id, values in order_tags(tags).items():
                native_table.add_row(tag_id, _display_text(values))
            self.console.print(native_table)


__all__ = ["MetadataDisplay", "metadata_to_dict"]
