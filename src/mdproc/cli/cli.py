"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdproc.cli.commands import headings_cmd, inspect_cmd, main_callback, render_cmd


app = typer.Typer(name="mdproc", no_args_is_help=True, help="Markdown frontmatter, headings, and HTML")

app.callback()(main_callback)
app.command(name="render")(render_cmd)
app.command(name="headings")(headings_cmd)
app.command(name="inspect")(inspect_cmd)
