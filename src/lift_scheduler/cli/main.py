"""
CLI entry point using Typer.

Provides commands for plan scheduling and set tracking:
- plans / activate / status / reset: choose and manage the active plan
- calendar / day / exercise: browse the generated schedule
- log-set / finish / summary: enter sets and review a training day
- options: rest timer
"""

from datetime import date

import typer

from . import views
from .app import app

# Importing the command modules registers their commands on ``app``
from .commands.options import options
from .commands.plans import plans, status
from .commands.sessions import calendar, day


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """
    Strength-training planner. Run without a command for interactive mode.
    """
    if ctx.invoked_subcommand is not None:
        return

    views.console.print()
    views.console.print("[bold cyan]lift-scheduler[/bold cyan]: strength-training planner")
    views.console.print()

    menu = {
        "1": ("status",   "Active plan"),
        "2": ("calendar", "Training calendar"),
        "3": ("today",    "Today's training day"),
        "4": ("plans",    "Available plans"),
        "5": ("options",  "Options"),
        "0": ("quit",     "Quit"),
    }

    for key, (_, desc) in menu.items():
        views.console.print(f"  \\[{key}] {desc}")

    views.console.print()
    choice = views.console.input("Choose [1]: ").strip() or "1"

    if choice == "0":
        raise typer.Exit(0)

    chosen = {k: v[0] for k, v in menu.items()}.get(choice)
    if chosen is None:
        views.print_error(f"Unknown choice: {choice}")
        raise typer.Exit(1)

    if chosen == "status":
        ctx.invoke(status)
    elif chosen == "calendar":
        ctx.invoke(calendar)
    elif chosen == "today":
        ctx.invoke(day, when=date.today().isoformat())
    elif chosen == "plans":
        ctx.invoke(plans)
    elif chosen == "options":
        ctx.invoke(options)


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
