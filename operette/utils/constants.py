"""
Centralized UI constants for consistent styling across operette.

Symbols and styles used when rendering operations in Rich console output.
"""

# Colorblind-friendly symbols and styles, keyed by operation state
SYMBOLS = {
    "pending": "[bold yellow]…[/bold yellow] ",
    "succeeded": "[bold green]✓[/bold green] ",
    "failed": "[bold red]![/bold red] ",
}

STYLE = {
    "header": "bold cyan",
    "dim": "dim",
    "pending": "yellow",
    "succeeded": "green",
    "failed": "red",
    "op_id": "cyan",
}
