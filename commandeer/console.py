# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Commandeer programs."""
from rich.console import Console

console = Console(color_system="auto")
error_console = Console(color_system="auto", stderr=True)
