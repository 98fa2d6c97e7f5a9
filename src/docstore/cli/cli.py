"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import get_cmd, search_cmd, stats_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="Query an in-memory document store built from a seed file")

app.command(name="get")(get_cmd)
app.command(name="search")(search_cmd)
app.command(name="stats")(stats_cmd)
