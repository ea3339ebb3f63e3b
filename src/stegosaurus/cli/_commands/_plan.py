# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, TC003  # Path needed at runtime for cyclopts parameter parsing
"""Plan command: show how each file under the template root is handled."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

from stegosaurus.exceptions import SiteError
from stegosaurus.templating import plan_site

from ._context import CLIContext, OutputFormat
from ._shared import exit_code_for_exception, exit_with_error, format_json, format_table

if TYPE_CHECKING:
    from stegosaurus.templating import FileTask, SiteConfig

app = App(name="plan", help="Show how each template file will be handled")


def _relative(path: Path | None, root: Path) -> str:
    if path is None:
        return ""
    return path.relative_to(root).as_posix()


def _plan_rows(tasks: list[FileTask], site: SiteConfig) -> list[list[str]]:
    return [
        [
            task.kind.value,
            _relative(task.source, site.template_dir),
            _relative(task.destination, site.output_dir),
        ]
        for task in tasks
    ]


@app.default
def plan(
    *,
    format: Annotated[  # noqa: A002
        OutputFormat, Parameter(name="--format", help="Output format")
    ] = OutputFormat.TABLE,
    template_dir: Annotated[
        Path | None,
        Parameter(name="--template-dir", help="Template root (overrides settings)"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        Parameter(name="--output-dir", help="Output root (overrides settings)"),
    ] = None,
) -> None:
    """Show how each template file will be handled

    Args:
        format: Output format
        template_dir: Template root (overrides settings)
        output_dir: Output root (overrides settings)
    """
    ctx = CLIContext.get_current()
    site = ctx.site_config(template_dir=template_dir, output_dir=output_dir)

    try:
        tasks = plan_site(site)
    except SiteError as e:
        exit_with_error(str(e), exit_code_for_exception(e))

    rows = _plan_rows(tasks, site)
    console = ctx.get_console()
    match format:
        case OutputFormat.JSON:
            data = [
                {"kind": kind, "source": source, "destination": destination or None}
                for kind, source, destination in rows
            ]
            console.print(
                format_json(data), markup=False, highlight=False, soft_wrap=True
            )
        case OutputFormat.PLAIN:
            for kind, source, destination in rows:
                line = f"{kind} {source}"
                if destination:
                    line += f" -> {destination}"
                console.print(line, markup=False, highlight=False, soft_wrap=True)
        case _:
            console.print(
                format_table(["Kind", "Source", "Destination"], rows),
                markup=False,
                highlight=False,
            )
