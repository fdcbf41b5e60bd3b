"""Tests for the Python module loader."""

import py_compile
import sys

import pytest

from gmrc.exceptions import ResolutionError
from gmrc.resolution.module_loader import load_module


class TestLoadModule:
    """Test executing Python config files."""

    def test_returns_default_export(self, write_module):
        """The module's ``default`` value is returned."""
        path = write_module(".gmrc.py", {"connectionString": "postgres:///app"})
        assert load_module(path) == {"connectionString": "postgres:///app"}

    def test_default_export_is_returned_unchanged(self, write_file):
        """Any value is accepted, including non-mappings."""
        path = write_file(
            ".gmrc.py",
            "class Sentinel:\n    pass\n\ndefault = Sentinel()\n",
        )
        value = load_module(path)
        assert type(value).__name__ == "Sentinel"

    @pytest.mark.parametrize("suffix", [".py", ".pyw"])
    def test_source_suffixes(self, write_module, suffix):
        """Both source suffixes are executed."""
        path = write_module(f"settings{suffix}", {"suffix": suffix})
        assert load_module(path) == {"suffix": suffix}

    def test_compiled_module(self, project_dir, write_module):
        """Compiled .pyc files are loaded too."""
        source = write_module("compiled_source.py", {"compiled": True})
        compiled = project_dir / "settings.pyc"
        py_compile.compile(str(source), cfile=str(compiled), doraise=True)
        source.unlink()

        assert load_module(compiled) == {"compiled": True}

    def test_relative_path_resolves_against_working_directory(self, write_module):
        """Relative paths are looked up in the working directory."""
        write_module("config/local.gmrc.py", {"relative": True})
        assert load_module("config/local.gmrc.py") == {"relative": True}

    def test_module_shadowing_stdlib_name(self, write_module):
        """A file named like an installed module loads the user's file."""
        path = write_module("json.py", {"mine": True})
        assert load_module(path) == {"mine": True}

    def test_module_removed_after_loading(self, write_module, write_file):
        """The temporary sys.modules entry is gone after success or failure."""
        good = write_module(".gmrc.py", {})
        bad = write_file("bad.py", "raise RuntimeError('boom')\n")
        before = set(sys.modules)

        load_module(good)
        with pytest.raises(ResolutionError):
            load_module(bad)

        assert {name for name in sys.modules if name.startswith("_gmrc")} <= before

    def test_dataclass_with_postponed_annotations(self, write_file):
        """Tools that look the module up in sys.modules work while it runs."""
        path = write_file(
            ".gmrc.py",
            "from __future__ import annotations\n"
            "from dataclasses import dataclass\n"
            "\n"
            "@dataclass\n"
            "class Database:\n"
            "    name: str\n"
            "    port: int = 5432\n"
            "\n"
            "default = {'db': Database('app')}\n",
        )

        settings = load_module(path)

        assert settings["db"].name == "app"
        assert settings["db"].port == 5432

    def test_executes_afresh_each_time(self, write_module):
        """Nothing is cached between loads."""
        path = write_module(".gmrc.py", {"version": 1})
        assert load_module(path) == {"version": 1}

        write_module(".gmrc.py", {"version": 2})
        assert load_module(path) == {"version": 2}

    def test_no_bytecode_written(self, project_dir, write_module):
        """Loading does not leave a __pycache__ next to the config."""
        write_module(".gmrc.py", {})
        load_module(project_dir / ".gmrc.py")
        assert not (project_dir / "__pycache__").exists()

    def test_missing_file(self, project_dir):
        """A missing file fails with the resolved file URI."""
        expected = (project_dir / "missing.py").resolve().as_uri()

        with pytest.raises(ResolutionError) as exc_info:
            load_module("missing.py")

        message = exc_info.value.message
        assert message.startswith(f"Failed to import '{expected}'; error:\n    ")
        assert "FileNotFoundError" in message
        assert exc_info.value.path == expected

    def test_missing_default_export(self, write_file):
        """A module without ``default`` is an import failure."""
        path = write_file(".gmrc.py", "settings = {}\n")

        with pytest.raises(ResolutionError) as exc_info:
            load_module(path)

        assert "does not define 'default'" in exc_info.value.message

    def test_syntax_error(self, write_file):
        """Syntax errors are reported as import failures."""
        path = write_file(".gmrc.py", "default = {\n")

        with pytest.raises(ResolutionError) as exc_info:
            load_module(path)

        assert "SyntaxError" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, SyntaxError)

    def test_runtime_error_keeps_indented_traceback(self, write_file):
        """Errors raised while executing keep their multi-line traceback."""
        path = write_file(
            ".gmrc.py",
            "def boom():\n"
            "    raise RuntimeError('database url missing')\n"
            "\n"
            "default = boom()\n",
        )

        with pytest.raises(ResolutionError) as exc_info:
            load_module(path)

        message = exc_info.value.message
        header, _, cause = message.partition("; error:\n")
        assert header == f"Failed to import '{path.resolve().as_uri()}'"

        cause_lines = cause.splitlines()
        assert len(cause_lines) > 2
        assert all(line.startswith("    ") for line in cause_lines)
        assert cause_lines[0] == "    Traceback (most recent call last):"
        assert cause_lines[-1] == "    RuntimeError: database url missing"
        assert any("in boom" in line for line in cause_lines)
