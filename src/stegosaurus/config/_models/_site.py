"""Site layout and template convention models."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stegosaurus.templating._models import MergeStrategy


class SiteSettings(BaseModel):
    """Site layout section.

    Paths are relative to the project root unless absolute.

    Attributes:
        template_dir: Directory walked for templates and static files.
        output_dir: Directory the rendered tree is written to.
        context_file: YAML document providing the root template context.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    template_dir: str = Field(default="templates", min_length=1)
    output_dir: str = Field(default="output", min_length=1)
    context_file: str = Field(default="context.yml", min_length=1)


class TemplateSettings(BaseModel):
    """Template conventions and Jinja2 environment section."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    partial_prefix: str = Field(default="_", min_length=1, max_length=1)
    extension: str = ".tmpl"
    merge_strategy: MergeStrategy = MergeStrategy.SHALLOW
    autoescape: bool = False
    strict_undefined: bool = True
    trim_blocks: bool = False
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = True

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        suffix = value[1:]
        if not value.startswith(".") or not suffix or "." in suffix or "/" in suffix:
            msg = "extension must look like '.tmpl'"
            raise ValueError(msg)
        return value
