import json
import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from sizeplot.utils.config import Config, init_config
from sizeplot.utils.exceptions import ConfigurationException, EmptyInputException, ScanException
from sizeplot.utils.file_io.size_scanner import iter_file_sizes
from sizeplot.utils.formatting import format_bytes
from sizeplot.utils.pretty.box_plot import render_box_plot, render_summary, resolve_canvas_width
from sizeplot.utils.pretty.color_logger import RichLog
from sizeplot.utils.pretty.terminal import FixedTerminalGeometry, RichTerminalGeometry
from sizeplot.utils.statistics import calculate_distribution, distribution_to_dict

app = typer.Typer(
    help="sizeplot",
    pretty_exceptions_enable=False,
    pretty_exceptions_show_locals=False,
    add_completion=False,
)
load_dotenv()


@app.callback()
def main() -> None: ...


@app.command()
def plot(
    path: Annotated[Path, typer.Argument(help="Directory to scan for files.", show_default=False)],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Optional TOML file overriding [scan] and [render] settings.", show_default=False),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option(help="Terminal width to lay out against instead of detecting it.", show_default=False),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the summary as JSON instead of labeled lines.", show_default=True),
    ] = False,
    debug: Annotated[bool, typer.Option(help="Enable debug logging for more verbose output.", show_default=True)] = False,
    log_file: Annotated[
        Path | None, typer.Option(help="Optional file to also write logs to.", show_default=False)
    ] = None,
) -> None:
    """
    Summarize the sizes of files under PATH and draw them as a box-plot.

    Only regular files larger than the configured minimum size (4096 bytes by default)
    are counted.
    """
    if debug:
        RichLog.set_level(logging.DEBUG)
        RichLog.debug("Debug logging enabled.")
    if log_file:
        RichLog.add_file_handler(str(log_file), overwrite=True)
        RichLog.info(f"Writing logs to file: {log_file}")

    Config.reset()
    try:
        config = init_config(config_file, width=width)
        min_size = config.get_int("scan", "min_size")
        default_width = config.get_int("render", "default_width")
        label_margin = config.get_int("render", "label_margin")
    except ConfigurationException as e:
        RichLog.error(str(e))
        raise typer.Exit(code=1) from e

    RichLog.debug(f"Scanning {path} for files larger than {min_size} bytes")
    try:
        sizes = list(iter_file_sizes(path, min_size=min_size))
        dist = calculate_distribution(sizes)
    except ScanException as e:
        RichLog.error(str(e))
        raise typer.Exit(code=1) from e
    except EmptyInputException as e:
        RichLog.error(f"No files found under {path} larger than {min_size} bytes.")
        raise typer.Exit(code=1) from e
    RichLog.debug(f"Collected {len(sizes)} file sizes: {dist}")

    if as_json:
        typer.echo(json.dumps(distribution_to_dict(dist), indent=4))
    else:
        for line in render_summary(dist, format_bytes):
            typer.echo(line)

    fixed_width = config.get("render", "width")
    geometry = FixedTerminalGeometry(fixed_width) if fixed_width is not None else RichTerminalGeometry()
    canvas_width = resolve_canvas_width(geometry, default_width=default_width, label_margin=label_margin)
    typer.echo(render_box_plot(dist, dist.max, canvas_width, format_bytes))


if __name__ == "__main__":
    app()
