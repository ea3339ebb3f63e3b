from pathlib import Path

import pytest
from jinja2 import UndefinedError

from stegosaurus.exceptions import DuplicateTemplateError, TemplateCompileError
from stegosaurus.templating import EnvironmentConfig, TemplateNamespace


@pytest.fixture
def namespace() -> TemplateNamespace:
    ns = TemplateNamespace()
    _ = ns.register("header", "Hi {{ name }}", path=Path("_header.tmpl"))
    return ns


class TestRegister:
    def test_registered_template_renders(self, namespace: TemplateNamespace) -> None:
        template = namespace.get_template("header")

        assert template.render(name="world") == "Hi world"

    def test_templates_can_include_each_other(
        self, namespace: TemplateNamespace
    ) -> None:
        _ = namespace.register("page", '{% include "header" %}!')

        assert namespace.get_template("page").render(name="you") == "Hi you!"

    def test_macros_are_importable_by_name(self) -> None:
        ns = TemplateNamespace()
        _ = ns.register("macros", "{% macro em(x) %}*{{ x }}*{% endmacro %}")
        _ = ns.register("page", '{% from "macros" import em %}{{ em("hi") }}')

        assert ns.get_template("page").render() == "*hi*"

    def test_duplicate_name_raises(self, namespace: TemplateNamespace) -> None:
        with pytest.raises(DuplicateTemplateError) as exc_info:
            _ = namespace.register("header", "other", path=Path("b/_header.tmpl"))

        error = exc_info.value
        assert error.name == "header"
        assert error.path == Path("b/_header.tmpl")
        assert error.existing_path == Path("_header.tmpl")

    def test_invalid_syntax_raises_compile_error(self) -> None:
        ns = TemplateNamespace()

        with pytest.raises(TemplateCompileError) as exc_info:
            _ = ns.register("broken", "{% if %}", path=Path("_broken.tmpl"))

        assert exc_info.value.name == "broken"
        assert "broken" not in ns

    def test_unknown_filter_raises_compile_error(self) -> None:
        with pytest.raises(TemplateCompileError):
            _ = TemplateNamespace().register("x", "{{ name|no_such_filter }}")

    def test_names_keep_registration_order(self) -> None:
        ns = TemplateNamespace()
        for name in ("b", "a", "c"):
            _ = ns.register(name, name)

        assert ns.names == ["b", "a", "c"]
        assert len(ns) == 3
        assert [entry.name for entry in ns] == ["b", "a", "c"]

    def test_get_unknown_template_raises_key_error(
        self, namespace: TemplateNamespace
    ) -> None:
        with pytest.raises(KeyError):
            _ = namespace.get_template("footer")


class TestClone:
    def test_clone_sees_existing_templates(self, namespace: TemplateNamespace) -> None:
        clone = namespace.clone()

        assert "header" in clone
        assert clone.get_template("header").render(name="x") == "Hi x"

    def test_registering_in_clone_does_not_touch_base(
        self, namespace: TemplateNamespace
    ) -> None:
        clone = namespace.clone()
        _ = clone.register("<root>", "body")

        assert "<root>" in clone
        assert "<root>" not in namespace
        with pytest.raises(KeyError):
            _ = namespace.get_template("<root>")

    def test_sibling_clones_are_independent(
        self, namespace: TemplateNamespace
    ) -> None:
        first = namespace.clone()
        second = namespace.clone()
        _ = first.register("<root>", "first {{ name }}")
        _ = second.register("<root>", "second {{ name }}")

        assert first.get_template("<root>").render(name="a") == "first a"
        assert second.get_template("<root>").render(name="b") == "second b"

    def test_clone_keeps_environment_options(self) -> None:
        ns = TemplateNamespace(EnvironmentConfig(strict_undefined=False))
        clone = ns.clone()
        _ = clone.register("<root>", "[{{ missing }}]")

        assert clone.get_template("<root>").render() == "[]"


class TestEnvironmentOptions:
    def test_strict_undefined_by_default(self) -> None:
        ns = TemplateNamespace()
        _ = ns.register("page", "{{ missing }}")

        with pytest.raises(UndefinedError):
            _ = ns.get_template("page").render()

    def test_autoescape_option(self) -> None:
        ns = TemplateNamespace(EnvironmentConfig(autoescape=True))
        _ = ns.register("page", "{{ html }}")

        assert ns.get_template("page").render(html="<b>") == "&lt;b&gt;"

    def test_trailing_newline_kept(self) -> None:
        ns = TemplateNamespace()
        _ = ns.register("page", "line\n")

        assert ns.get_template("page").render() == "line\n"
