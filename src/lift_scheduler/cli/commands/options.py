"""Options command: view or change user options."""

import json
from typing import Annotated, Optional

import typer

from ...core.config import REST_SECONDS_MAX, REST_SECONDS_MIN
from ...io.serializers import options_to_dict
from .. import views
from ..app import JsonOption, StatePathOption, app, open_tracker


@app.command()
def options(
    rest_seconds: Annotated[
        Optional[int],
        typer.Option(
            "--rest-seconds",
            help=f"Rest timer between sets ({REST_SECONDS_MIN}-{REST_SECONDS_MAX} s)",
        ),
    ] = None,
    state_path: StatePathOption = None,
    json_out: JsonOption = False,
) -> None:
    """Show or change options."""
    store, tracker = open_tracker(state_path)

    if rest_seconds is not None:
        stored = tracker.set_rest_seconds(rest_seconds)
        store.save_tracker(tracker)
        if stored != rest_seconds and not json_out:
            views.print_warning(f"Rest timer clamped to {stored}s")

    if json_out:
        print(json.dumps(options_to_dict(tracker.options), indent=2))
        return

    views.console.print(f"Rest timer: {tracker.options.rest_seconds}s")
