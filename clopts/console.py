# clopts — MIT Licensed
"""Global console instance for clopts output."""
from rich.console import Console

console = Console()
