"""Built-in settings, the lowest layer merged by `Config.load`."""

from typing import Any

SETTINGS_FILENAME = "stegosaurus.toml"

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "site": {
        "template_dir": "templates",
        "output_dir": "output",
        "context_file": "context.yml",
    },
    "templates": {
        "partial_prefix": "_",
        "extension": ".tmpl",
        "merge_strategy": "shallow",
        "autoescape": False,
        "strict_undefined": True,
        "trim_blocks": False,
        "lstrip_blocks": False,
        "keep_trailing_newline": True,
    },
    "logging": {
        "level": "info",
        "format": "text",
        "file": "",
    },
}
