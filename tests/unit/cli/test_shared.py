from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, cast

import orjson
import pytest
from cyclopts import App
from rich.console import Console

from stegosaurus.cli._commands import (
    CLIContext,
    ExitCode,
    exit_code_for_exception,
    exit_with_error,
    format_json,
    format_table,
    register_commands,
)
from stegosaurus.config import Config
from stegosaurus.exceptions import (
    ConfigLoadError,
    ConfigReadError,
    ConfigValidationError,
    DuplicateTemplateError,
    FrontMatterFormatError,
    FrontMatterParseError,
    SiteIOError,
    StegosaurusError,
    TemplateCompileError,
    TemplateExecutionError,
)

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


class TestCommandRegistration:
    def test_registers_build_and_plan(self, mocker: MockerFixture) -> None:
        mock_app = mocker.MagicMock(spec=App)

        register_commands(mock_app)

        assert cast("int", mock_app.command.call_count) == 2  # pyright: ignore[reportAny]


class TestExitCodeForException:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ConfigLoadError("bad toml"), ExitCode.LOAD_ERROR),
            (ConfigReadError("bad yaml"), ExitCode.LOAD_ERROR),
            (
                ConfigValidationError("bad", key="k", value=1, expected="str"),
                ExitCode.VALIDATION_ERROR,
            ),
            (TemplateCompileError("bad"), ExitCode.VALIDATION_ERROR),
            (DuplicateTemplateError("dup", name="x"), ExitCode.VALIDATION_ERROR),
            (FrontMatterFormatError("open"), ExitCode.VALIDATION_ERROR),
            (FrontMatterParseError("yaml"), ExitCode.VALIDATION_ERROR),
            (FileNotFoundError("gone"), ExitCode.NOT_FOUND),
            (SiteIOError("disk"), ExitCode.IO_ERROR),
            (PermissionError("denied"), ExitCode.IO_ERROR),
            (TemplateExecutionError("undefined"), ExitCode.RENDER_ERROR),
            (StegosaurusError("other"), ExitCode.INTERNAL_ERROR),
            (RuntimeError("boom"), ExitCode.INTERNAL_ERROR),
        ],
    )
    def test_mapping(self, error: BaseException, code: ExitCode) -> None:
        assert exit_code_for_exception(error) is code


class TestFormatters:
    def test_format_json(self) -> None:
        data = [{"kind": "copy", "source": "logo.png", "destination": None}]

        assert orjson.loads(format_json(data)) == data
        assert format_json(data).startswith("[\n  {")

    def test_format_table(self) -> None:
        table = format_table(["Kind", "Source"], [["template", "index.tmpl"]])

        assert "Kind" in table
        assert "index.tmpl" in table
        assert table.count("|") >= 6


class TestExitWithError:
    def test_prints_and_exits(
        self, console: Console, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            exit_with_error("it [broke]", ExitCode.IO_ERROR, console=console)

        assert exc_info.value.code == ExitCode.IO_ERROR
        assert "Error: it [broke]" in capsys.readouterr().out


class TestCLIContext:
    @pytest.fixture(autouse=True)
    def _reset(self) -> None:
        CLIContext.reset()

    def test_default_context(self) -> None:
        ctx = CLIContext.get_current()

        assert ctx.verbose is False
        assert ctx.config.site.output_dir == "output"

    def test_set_and_reset(self) -> None:
        ctx = CLIContext(config=Config.from_dict({}), verbose=True)

        CLIContext.set_current(ctx)
        assert CLIContext.get_current() is ctx

        CLIContext.reset()
        assert CLIContext.get_current() is not ctx

    def test_site_config_uses_project_root(self, tmp_path: Path) -> None:
        ctx = CLIContext(config=Config.from_dict({}), project_root=tmp_path)

        site = ctx.site_config()

        assert site.template_dir == tmp_path.resolve() / "templates"

    def test_site_config_overrides(self, tmp_path: Path) -> None:
        ctx = CLIContext(config=Config.from_dict({}), project_root=tmp_path)

        site = ctx.site_config(output_dir=tmp_path / "public")

        assert site.output_dir == (tmp_path / "public").resolve()
        assert site.template_dir == tmp_path.resolve() / "templates"
