# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, TC003  # Path needed at runtime for cyclopts parameter parsing
"""Build command: render the template tree into the output tree."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from stegosaurus.exceptions import SiteError
from stegosaurus.templating import build_site

from ._context import CLIContext
from ._shared import exit_code_for_exception, exit_with_error

app = App(
    name="build", help="Render templates and copy files into the output directory"
)


@app.default
def build(
    *,
    clean: Annotated[
        bool, Parameter(help="Remove the output directory before building")
    ] = False,
    template_dir: Annotated[
        Path | None,
        Parameter(name="--template-dir", help="Template root (overrides settings)"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        Parameter(name="--output-dir", help="Output root (overrides settings)"),
    ] = None,
    context: Annotated[
        Path | None,
        Parameter(name="--context", help="Global context file (overrides settings)"),
    ] = None,
) -> None:
    """Render templates and copy files into the output directory

    Args:
        clean: Remove the output directory before building
        template_dir: Template root (overrides settings)
        output_dir: Output root (overrides settings)
        context: Global context file (overrides settings)
    """
    ctx = CLIContext.get_current()
    site = ctx.site_config(
        template_dir=template_dir, output_dir=output_dir, context_file=context
    )

    try:
        result = build_site(site, clean=clean, logger=ctx.logger)
    except SiteError as e:
        exit_with_error(str(e), exit_code_for_exception(e))

    if not ctx.quiet:
        console = ctx.get_console()
        console.print(
            f"Built {result.total} file(s) into {site.output_dir} "
            f"({len(result.rendered)} rendered, {len(result.copied)} copied, "
            f"{len(result.partials)} partial(s) loaded)",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        if ctx.verbose:
            for path in [*result.rendered, *result.copied]:
                console.print(
                    f"  {path.relative_to(site.output_dir).as_posix()}",
                    markup=False,
                    highlight=False,
                )
