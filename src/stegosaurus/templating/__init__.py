r"""Stegosaurus templating: renders a template tree into an output tree.

Basic usage:
    from pathlib import Path

    from stegosaurus.templating import SiteConfig, build_site

    config = SiteConfig.at(Path.cwd())
    result = build_site(config)

Files under the template root are handled by name:

- ``_header.tmpl`` is a partial, registered as ``header`` and reachable from
  every template with ``{% include "header" %}``.
- ``index.html.tmpl`` is rendered to ``index.html``; it may start with a
  ``---`` fenced YAML block overriding values of the global context.
- Anything else is copied unchanged.
"""

from ._context import (
    Context,
    YAMLKey,
    YAMLValue,
    copy_context,
    load_context,
    merge_context,
    parse_yaml_mapping,
)
from ._environment import EnvironmentConfig, create_environment
from ._frontmatter import (
    DELIMITER,
    SplitResult,
    load_frontmatter_file,
    split_frontmatter,
)
from ._models import (
    ROOT_TEMPLATE_NAME,
    BuildResult,
    FileKind,
    FileTask,
    MergeStrategy,
    SiteConfig,
)
from ._namespace import TemplateEntry, TemplateNamespace
from ._registry import load_base_templates
from ._renderer import render_file
from ._site import build_site, clean_output
from ._walker import classify, copy_file, iter_template_files, output_path, plan_site

__all__ = [
    "DELIMITER",
    "ROOT_TEMPLATE_NAME",
    "BuildResult",
    "Context",
    "EnvironmentConfig",
    "FileKind",
    "FileTask",
    "MergeStrategy",
    "SiteConfig",
    "SplitResult",
    "TemplateEntry",
    "TemplateNamespace",
    "YAMLKey",
    "YAMLValue",
    "build_site",
    "classify",
    "clean_output",
    "copy_file",
    "create_environment",
    "copy_context",
    "iter_template_files",
    "load_base_templates",
    "load_context",
    "load_frontmatter_file",
    "merge_context",
    "output_path",
    "parse_yaml_mapping",
    "plan_site",
    "render_file",
    "split_frontmatter",
]
