"""Version banner for tallyfile."""

from tallyfile.ui.console import LOGO_EMOJI, VERSION, console


def show_version() -> None:
    """Show version information (for --version flag)."""
    console.print(f"{LOGO_EMOJI} [header]tallyfile[/header] [dim]v{VERSION}[/dim]")
    console.print("[dim]Tally counter with file-backed storage[/dim]")


__all__ = ["show_version"]
