"""Tests for accessor source emission.

Generated modules are compiled and executed so behavior is checked, not
just text.

Python 3.13+.
"""

from __future__ import annotations

import ast
import inspect
from pathlib import Path
from typing import Any

import pytest

from botstrings.codegen import build_descriptors, generate_source, render_accessor, write_generated
from botstrings.config import GeneratorConfig


class RecordingStrings:
    """StringLookup double that records its calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[object, ...]]] = []

    def get_text(self, key: str, culture: str, *data: object) -> str:
        self.calls.append((key, culture, data))
        return f"{key}@{culture}"


class FixedCultures:
    """CultureResolver double with a static guild table."""

    def __init__(self, cultures: dict[int, str]) -> None:
        self.cultures = cultures

    def get_culture(self, guild_id: int | None = None) -> str:
        if guild_id is None:
            return "en-US"
        return self.cultures.get(guild_id, "en-US")


def _load_class(source: str, class_name: str = "GeneratedBotStrings") -> Any:
    namespace: dict[str, Any] = {}
    exec(compile(source, "<generated>", "exec"), namespace)  # noqa: S102
    return namespace[class_name]


RESOURCES = {
    "en-US": {
        "ping": "Pong!",
        "greeting": "Hello {0}, you have {1} items",
        "error_code": "Error code: {2}",
        "8ball": "The answer is {0}",
        "none": "Nothing",
    },
    "de-DE": {
        "ping": "Pong!",
        "only_german": "Nur {0}",
    },
}


class TestGenerateSource:
    """Test the shape of the generated module."""

    def test_compiles(self) -> None:
        source = generate_source(RESOURCES)

        ast.parse(source)

    def test_deterministic(self) -> None:
        """Identical input gives byte-identical output."""
        first = generate_source(RESOURCES)
        reordered = {
            "de-DE": dict(reversed(list(RESOURCES["de-DE"].items()))),
            "en-US": dict(reversed(list(RESOURCES["en-US"].items()))),
        }

        assert generate_source(RESOURCES) == first
        assert generate_source(reordered) == first

    def test_ends_with_single_newline(self) -> None:
        source = generate_source(RESOURCES)

        assert source.endswith("\n")
        assert not source.endswith("\n\n")

    def test_one_method_per_key(self) -> None:
        cls = _load_class(generate_source(RESOURCES))
        methods = {
            name
            for name, _ in inspect.getmembers(cls, inspect.isfunction)
            if not name.startswith("_")
        }

        assert methods == {
            "Eightball",
            "ErrorCode",
            "Greeting",
            "OnlyGerman",
            "Ping",
            "ResponseNone",
        }

    def test_methods_in_sorted_key_order(self) -> None:
        source = generate_source(RESOURCES)
        tree = ast.parse(source)
        (cls,) = [n for n in tree.body if isinstance(n, ast.ClassDef)]
        names = [n.name for n in cls.body if isinstance(n, ast.FunctionDef)]

        assert names == [
            "__init__",
            "_get_culture",
            "Eightball",
            "ErrorCode",
            "Greeting",
            "ResponseNone",
            "OnlyGerman",
            "Ping",
        ]

    def test_signatures_follow_shape(self) -> None:
        cls = _load_class(generate_source(RESOURCES))

        assert list(inspect.signature(cls.Ping).parameters) == ["self", "guild_id"]
        assert list(inspect.signature(cls.Greeting).parameters) == [
            "self",
            "guild_id",
            "param0",
            "param1",
        ]
        variadic = inspect.signature(cls.ErrorCode).parameters["data"]
        assert variadic.kind is inspect.Parameter.VAR_POSITIONAL

    def test_empty_resources(self) -> None:
        cls = _load_class(generate_source({}))

        assert cls(RecordingStrings(), FixedCultures({})) is not None

    def test_custom_class_name(self) -> None:
        config = GeneratorConfig(class_name="Strings")
        source = generate_source(RESOURCES, config)

        assert '__all__ = ["Strings"]' in source
        assert _load_class(source, "Strings") is not None

    def test_header_lists_locales(self) -> None:
        source = generate_source(RESOURCES)

        assert source.splitlines()[1] == "# Locales: de-DE, en-US"


class TestGeneratedBehavior:
    """Test that generated methods call the collaborators correctly."""

    def test_zero_parameter_call(self) -> None:
        strings = RecordingStrings()
        instance = _load_class(generate_source(RESOURCES))(strings, FixedCultures({7: "de-DE"}))

        assert instance.Ping(7) == "ping@de-DE"
        assert strings.calls == [("ping", "de-DE", ())]

    def test_positional_call(self) -> None:
        strings = RecordingStrings()
        instance = _load_class(generate_source(RESOURCES))(strings, FixedCultures({}))

        instance.Greeting(None, "Ann", 3)

        assert strings.calls == [("greeting", "en-US", ("Ann", 3))]

    def test_variadic_pass_through(self) -> None:
        """Variadic arguments are forwarded unchanged, without arity checks."""
        strings = RecordingStrings()
        instance = _load_class(generate_source(RESOURCES))(strings, FixedCultures({}))

        instance.ErrorCode(1, "a", "b", "c", "d")
        instance.ErrorCode(1)

        assert strings.calls == [
            ("error_code", "en-US", ("a", "b", "c", "d")),
            ("error_code", "en-US", ()),
        ]

    def test_key_without_default_still_callable(self) -> None:
        strings = RecordingStrings()
        instance = _load_class(generate_source(RESOURCES))(strings, FixedCultures({}))

        instance.OnlyGerman(None, "x")

        assert strings.calls == [("only_german", "en-US", ("x",))]

    def test_positional_arity_enforced(self) -> None:
        instance = _load_class(generate_source(RESOURCES))(RecordingStrings(), FixedCultures({}))

        with pytest.raises(TypeError):
            instance.Greeting(None, "only one")


class TestDocumentation:
    """Test per-method documentation metadata."""

    def test_docstring_metadata(self) -> None:
        cls = _load_class(generate_source(RESOURCES))
        doc = inspect.getdoc(cls.Greeting)

        assert doc is not None
        assert 'Localized text for key "greeting".' in doc
        assert 'Default (en-US): "Hello {0}, you have {1} items"' in doc
        assert "Available in locales: en-US" in doc
        assert "Parameter count: 2" in doc
        assert "param1: Format parameter 1" in doc

    def test_missing_default_documented_empty(self) -> None:
        cls = _load_class(generate_source(RESOURCES))
        doc = inspect.getdoc(cls.OnlyGerman)

        assert doc is not None
        assert 'Default (en-US): ""' in doc
        assert "Available in locales: de-DE" in doc

    @pytest.mark.parametrize(
        "value",
        ['"""', 'ends with quote"', "back\\slash", "multi\nline", "tab\there", "nul\x00", "\\"],
    )
    def test_hostile_default_values_stay_in_docstring(self, value: str) -> None:
        """Templates cannot break out of the generated docstring."""
        resources = {"en-US": {"k": value}}
        source = generate_source(resources)
        cls = _load_class(source)
        doc = cls.K.__doc__

        assert "return self._strings.get_text" not in doc
        assert len(source.splitlines()) == len(generate_source({"en-US": {"k": "x"}}).splitlines())

    def test_hostile_key_is_literal(self) -> None:
        """Keys are emitted as Python literals, whatever they contain."""
        key = "quote\"and'\\n\n"
        strings = RecordingStrings()
        cls = _load_class(generate_source({"en-US": {key: ""}}))

        cls(strings, FixedCultures({})).QuoteAndN(None)

        assert strings.calls == [(key, "en-US", ())]


class TestRenderAccessor:
    """Test single accessor rendering."""

    def test_indented_for_class_body(self) -> None:
        (descriptor,) = build_descriptors({"en-US": {"ping": "Pong!"}})

        rendered = render_accessor(descriptor, "en-US")

        assert rendered.startswith("    def Ping(self, guild_id: int | None) -> str:\n")
        assert rendered.endswith(
            "        return self._strings.get_text('ping', self._get_culture(guild_id))\n"
        )


class TestWriteGenerated:
    """Test write-if-changed output."""

    def test_writes_new_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out" / "generated.py"

        assert write_generated(target, "x = 1\n")
        assert target.read_text(encoding="utf-8") == "x = 1\n"

    def test_identical_content_untouched(self, tmp_path: Path) -> None:
        target = tmp_path / "generated.py"
        write_generated(target, "x = 1\n")
        mtime = target.stat().st_mtime_ns

        assert not write_generated(target, "x = 1\n")
        assert target.stat().st_mtime_ns == mtime

    def test_changed_content_rewritten(self, tmp_path: Path) -> None:
        target = tmp_path / "generated.py"
        write_generated(target, "x = 1\n")

        assert write_generated(target, "x = 2\n")
        assert target.read_text(encoding="utf-8") == "x = 2\n"
