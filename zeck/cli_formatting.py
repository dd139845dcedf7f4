"""Rich CLI formatting helpers for zeck commands."""

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def print_error(message: str):
    err_console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str):
    err_console.print(f"[yellow]Warning:[/yellow] {message}")


def _change_text(original: int, compressed: int) -> str:
    ratio = compressed / max(original, 1)
    if ratio < 1.0:
        return f"[green]compressed by {(1.0 - ratio) * 100:.2f}%[/green]"
    return f"[red]expanded by {(ratio - 1.0) * 100:.2f}%[/red]"


def print_compress_results(stats: dict):
    """Print compress results as a rich table."""
    table = Table(title="Compression Results", border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Input", stats["input_path"])
    table.add_row("Output", stats["output_path"])
    table.add_row("Original", f"{stats['original_bytes']:,} bytes")
    table.add_row("Payload", f"{stats['compressed_bytes']:,} bytes")
    table.add_row("File size", f"{stats['file_bytes']:,} bytes")
    table.add_row("Change", _change_text(stats["original_bytes"], stats["compressed_bytes"]))
    table.add_row("Endianness", f"{stats['endian']} endian")
    if stats.get("requested_endian") == "best":
        table.add_row("Big endian size", f"{stats['be_size']:,} bytes")
        table.add_row("Little endian size", f"{stats['le_size']:,} bytes")
    table.add_row("Time", f"{stats['elapsed_sec'] * 1000:.0f}ms")
    console.print(table)


def print_decompress_results(stats: dict):
    """Print decompress results."""
    table = Table(title="Decompression Results", border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Input", stats["input_path"])
    table.add_row("Output", stats["output_path"])
    table.add_row("Payload", f"{stats['compressed_bytes']:,} bytes")
    table.add_row("Decompressed", f"{stats['decompressed_bytes']:,} bytes")
    table.add_row("Endianness", f"{stats['endian']} endian")
    table.add_row("Time", f"{stats['elapsed_sec'] * 1000:.0f}ms")
    console.print(table)


def print_file_info(name: str, zeck_file, file_bytes: int):
    """Print the header fields of a .zeck file."""
    table = Table(title=f"Zeck File Info: {name}", border_style="cyan")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", str(zeck_file.version))
    table.add_row("Original Size", f"{zeck_file.original_size:,} bytes")
    table.add_row("Payload Size", f"{len(zeck_file.compressed_data):,} bytes")
    table.add_row("File Size", f"{file_bytes:,} bytes")
    table.add_row("Flags", f"0x{zeck_file.flags:02x}")
    table.add_row("Endianness", f"{zeck_file.endian} endian")
    table.add_row("Change", _change_text(zeck_file.original_size, len(zeck_file.compressed_data)))
    console.print(table)
