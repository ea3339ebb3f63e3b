from pathlib import Path

import pytest

from stegosaurus.exceptions import SiteIOError
from stegosaurus.templating import (
    FileKind,
    SiteConfig,
    classify,
    copy_file,
    iter_template_files,
    output_path,
    plan_site,
)
from tests.conftest import WriteFile


@pytest.fixture
def config() -> SiteConfig:
    return SiteConfig.at(Path("/site"))


class TestClassify:
    @pytest.mark.parametrize(
        ("name", "kind"),
        [
            ("_header.tmpl", FileKind.PARTIAL),
            ("_notes.txt", FileKind.SKIPPED),
            ("index.html.tmpl", FileKind.TEMPLATE),
            ("page.tmpl", FileKind.TEMPLATE),
            ("logo.png", FileKind.COPY),
            ("page.tmpl.bak", FileKind.COPY),
            ("under_score.tmpl", FileKind.TEMPLATE),
        ],
    )
    def test_kinds(self, config: SiteConfig, name: str, kind: FileKind) -> None:
        assert classify(Path("/site/templates") / name, config) is kind

    def test_custom_conventions(self) -> None:
        config = SiteConfig.at(Path("/site"), partial_prefix="~", extension=".j2")

        assert classify(Path("/site/templates/~nav.j2"), config) is FileKind.PARTIAL
        assert classify(Path("/site/templates/_nav.j2"), config) is FileKind.TEMPLATE
        assert classify(Path("/site/templates/a.tmpl"), config) is FileKind.COPY
        assert config.partial_name(Path("~nav.j2")) == "nav"


class TestOutputPath:
    def test_template_extension_is_stripped(self, config: SiteConfig) -> None:
        result = output_path(Path("/site/templates/blog/post.html.tmpl"), config)

        assert result == Path("/site/output/blog/post.html")

    def test_plain_file_keeps_name(self, config: SiteConfig) -> None:
        result = output_path(Path("/site/templates/img/logo.png"), config)

        assert result == Path("/site/output/img/logo.png")


class TestPlanSite:
    def test_plans_every_file_in_sorted_order(
        self, site_config: SiteConfig, write_template: WriteFile
    ) -> None:
        write_template("z.txt", "z")
        write_template("a/_nav.tmpl", "nav")
        write_template("a/page.tmpl", "page")
        write_template("_skip.md", "skip")

        tasks = plan_site(site_config)

        root = site_config.template_dir
        assert [(t.source.relative_to(root).as_posix(), t.kind) for t in tasks] == [
            ("_skip.md", FileKind.SKIPPED),
            ("a/_nav.tmpl", FileKind.PARTIAL),
            ("a/page.tmpl", FileKind.TEMPLATE),
            ("z.txt", FileKind.COPY),
        ]

    def test_destinations(
        self, site_config: SiteConfig, write_template: WriteFile
    ) -> None:
        write_template("_nav.tmpl", "nav")
        write_template("docs/page.tmpl", "page")
        write_template("docs/style.css", "css")

        tasks = {t.source.name: t for t in plan_site(site_config)}

        assert tasks["_nav.tmpl"].destination is None
        assert tasks["page.tmpl"].destination == site_config.output_dir / "docs/page"
        assert (
            tasks["style.css"].destination == site_config.output_dir / "docs/style.css"
        )

    def test_directories_are_not_tasks(
        self, site_config: SiteConfig, site_root: Path
    ) -> None:
        (site_root / "templates" / "empty" / "nested").mkdir(parents=True)

        assert plan_site(site_config) == []

    @pytest.mark.parametrize("output", ["templates/out", "templates"])
    def test_output_inside_template_root_is_rejected(
        self, site_root: Path, write_template: WriteFile, output: str
    ) -> None:
        write_template("page.tmpl", "p")
        config = SiteConfig.at(site_root, output_dir=site_root / output)

        with pytest.raises(SiteIOError, match="inside the template directory"):
            _ = plan_site(config)

    def test_missing_template_root_raises(self, tmp_path: Path) -> None:
        config = SiteConfig.at(tmp_path / "nowhere")

        with pytest.raises(SiteIOError, match="Template directory does not exist"):
            _ = iter_template_files(config.template_dir)


class TestCopyFile:
    def test_copies_bytes_and_creates_parents(self, tmp_path: Path) -> None:
        source = tmp_path / "logo.png"
        source.write_bytes(b"\x89PNG\x00\xff")
        destination = tmp_path / "out" / "img" / "logo.png"

        result = copy_file(source, destination)

        assert result == destination
        assert destination.read_bytes() == b"\x89PNG\x00\xff"

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        source = tmp_path / "a.txt"
        source.write_text("new")
        destination = tmp_path / "b.txt"
        destination.write_text("old contents")

        _ = copy_file(source, destination)

        assert destination.read_text() == "new"

    def test_failure_raises_site_io_error(self, tmp_path: Path) -> None:
        with pytest.raises(SiteIOError) as exc_info:
            _ = copy_file(tmp_path / "missing", tmp_path / "out")

        assert exc_info.value.path == tmp_path / "missing"
