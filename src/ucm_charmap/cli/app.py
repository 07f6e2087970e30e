"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ucm_charmap.core.charmap import Charmap
from ucm_charmap.core.constants import SENTINEL
from ucm_charmap.core.errors import CharmapError


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route library log records through rich."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def parse_byte(value: str) -> int:
    """Parse ``0x41``, ``65`` or ``\\x41`` as a byte value."""
    text = value.strip()
    if text.lower().startswith("\\x"):
        text = "0x" + text[2:]
    byte = int(text, 0)
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {value}")
    return byte


def parse_char(value: str) -> str:
    """Parse ``U+20AC`` or a literal single character."""
    if len(value) == 1:
        return value
    if value[:2].upper() == "U+":
        return chr(int(value[2:], 16))
    raise ValueError(f"not a character: {value!r}")


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ucm-charmap",
        help="Build static single-byte charmap tables from UCM mapping files.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main_options(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress")] = False,
        debug: Annotated[bool, typer.Option("--debug", help="Log skipped lines and details")] = False,
    ) -> None:
        setup_logging(verbose=verbose, debug=debug)

    def build_one(locator: str, name: str | None, replacement: int, base_dir: Path | None) -> Charmap:
        from ucm_charmap.io.reader import load_mapping
        from ucm_charmap.table.builder import build_charmap

        try:
            mapping = load_mapping(locator, base_dir=base_dir)
            return build_charmap(mapping, name or Path(locator).stem, replacement)
        except CharmapError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    @app.command()
    def build(
        definitions: Annotated[Optional[Path], typer.Argument(help="JSON file of encoding definitions")] = None,
        output: Annotated[Path, typer.Option("--output", "-o", help="Output file")] = Path("tables.go"),
        format: Annotated[Optional[str], typer.Option("--format", "-f", help="Output format: go, python, json (auto-detected from extension)")] = None,
        package: Annotated[Optional[str], typer.Option("--package", "-p", help="Package name for generated Go code")] = None,
        base_dir: Annotated[Optional[Path], typer.Option("--base-dir", "-b", help="Directory for relative mapping files")] = None,
    ) -> None:
        """Build charmaps for every encoding definition and write them out."""
        from ucm_charmap.config.definitions import DEFAULT_ENCODINGS, load_definitions
        from ucm_charmap.generate import generate
        from ucm_charmap.io.writer import save

        try:
            encodings = load_definitions(definitions) if definitions else list(DEFAULT_ENCODINGS)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        try:
            charmaps = generate(encodings, base_dir=base_dir)
            path = save(charmaps, output, fmt=format, package=package)
        except (CharmapError, ValueError) as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        for generated in charmaps:
            charmap = generated.charmap
            console.print(
                f"[green]{charmap.name}[/]: {charmap.encoded_count} characters, "
                f"asciiSuperset={str(charmap.ascii_superset).lower()}"
            )
        console.print(f"[bold]Wrote {len(charmaps)} charmap(s)[/] → {path}")

    @app.command()
    def inspect(
        locator: Annotated[str, typer.Argument(help="Mapping file path or URL")],
        name: Annotated[Optional[str], typer.Option("--name", "-n", help="Table name")] = None,
        replacement: Annotated[str, typer.Option("--replacement", "-r", help="Replacement byte")] = "0x3f",
        base_dir: Annotated[Optional[Path], typer.Option("--base-dir", "-b", help="Directory for relative mapping files")] = None,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show a summary of the charmap built from one mapping file."""
        try:
            replacement_byte = parse_byte(replacement)
        except ValueError as e:
            console.print(f"[red]Invalid replacement: {e}[/]")
            raise typer.Exit(1)

        charmap = build_one(locator, name, replacement_byte, base_dir)
        unmapped = sum(1 for e in charmap.decode if e.char == SENTINEL)

        if json_output:
            data = {
                "name": charmap.name,
                "asciiSuperset": charmap.ascii_superset,
                "low": charmap.low,
                "replacement": charmap.replacement,
                "encodable": charmap.encoded_count,
                "unmapped": unmapped,
                "size": charmap.table_size,
            }
            print(json.dumps(data, indent=2))
            return

        table = Table(title=f"Charmap {charmap.name}", show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("ASCII superset", str(charmap.ascii_superset).lower())
        table.add_row("Low", f"0x{charmap.low:02x}")
        table.add_row("Replacement", f"0x{charmap.replacement:02x}")
        table.add_row("Encodable characters", str(charmap.encoded_count))
        table.add_row("Unmapped bytes", str(unmapped))
        table.add_row("Table size", f"{charmap.table_size} bytes")
        console.print(table)

    @app.command()
    def lookup(
        locator: Annotated[str, typer.Argument(help="Mapping file path or URL")],
        value: Annotated[str, typer.Argument(help="Byte (0x80) to decode, or character (U+20AC) to encode")],
        base_dir: Annotated[Optional[Path], typer.Option("--base-dir", "-b", help="Directory for relative mapping files")] = None,
    ) -> None:
        """Look up a byte or a character in a built charmap."""
        charmap = build_one(locator, None, 0x3F, base_dir)

        if value.lower().startswith(("0x", "\\x")) or (value.isdigit() and len(value) > 1):
            try:
                byte = parse_byte(value)
            except ValueError as e:
                console.print(f"[red]{e}[/]")
                raise typer.Exit(1)
            char = charmap.decode_byte(byte)
            console.print(f"0x{byte:02X} → U+{ord(char):04X} {char!r}")
            return

        try:
            char = parse_char(value)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        byte = charmap.encode_char_or_replacement(char)
        if charmap.decode_byte(byte) != char:
            console.print(
                f"[yellow]U+{ord(char):04X} is not mapped[/] "
                f"(replacement 0x{byte:02X})"
            )
            raise typer.Exit(1)
        console.print(f"U+{ord(char):04X} {char!r} → 0x{byte:02X}")

    return app
