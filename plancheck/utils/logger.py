from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from ..config import DEBUG
console = Console(highlight=False)
def info(msg: str): console.print(f"[bold cyan]INFO[/]: {escape(msg)}")
def warn(msg: str): console.print(f"[bold yellow]WARN[/]: {escape(msg)}")
def error(msg: str): console.print(f"[bold red]ERROR[/]: {escape(msg)}")
def debug(msg: str):
    if DEBUG: console.print(f"[dim]DEBUG[/]: {escape(msg)}")
def panel(title: str, content): console.print(Panel.fit(content, title=escape(title)))
def task_table(rows: list[dict]) -> Table:
    table = Table("task", "x", "y", "width", "height")
    for r in rows: table.add_row(escape(r["name"]), str(r["x"]), str(r["y"]), str(r["width"]), str(r["height"]))
    return table
