"""End-to-end tests for the create-godotrs command line.

These drive ``create_godotrs.cli.main`` exactly as the console script does
and check exit codes, console output and the resulting tree.

No external tools (cargo, godot) are required.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

from conftest import BASIC_FILES, PROTO_EXTRA_DIRS, snapshot_tree, split_tree
from create_godotrs.cli import EXIT_CODES, build_parser, exit_code_for, main
from create_godotrs.errors import (
    CreateError,
    InvalidTemplateError,
    ProjectAlreadyExistsError,
    ProjectIOError,
)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestCli:
    def test_basic_project(self, base_dir: Path, capsys) -> None:
        code = main(["mygame", "--path", str(base_dir)])

        assert code == 0
        root = base_dir / "mygame"
        _, files = split_tree(root)
        assert files == set(BASIC_FILES)

        out = capsys.readouterr().out
        assert "Successfully created project: mygame" in out
        assert "Cargo.toml" in out

    def test_proto_project(self, base_dir: Path) -> None:
        code = main(["mygame", "--template", "proto", "--path", str(base_dir)])

        assert code == 0
        dirs, _ = split_tree(base_dir / "mygame")
        assert set(PROTO_EXTRA_DIRS) <= dirs

    def test_defaults_to_cwd(self, base_dir: Path, monkeypatch) -> None:
        monkeypatch.chdir(base_dir)
        assert main(["here"]) == 0
        manifest = tomllib.loads(
            (base_dir / "here" / "rust" / "Cargo.toml").read_text(encoding="utf-8")
        )
        assert manifest["package"]["name"] == "here"

    def test_existing_project(self, base_dir: Path, capsys) -> None:
        assert main(["mygame", "--path", str(base_dir)]) == 0
        before = snapshot_tree(base_dir)
        capsys.readouterr()

        code = main(["mygame", "--path", str(base_dir)])

        assert code == EXIT_CODES[ProjectAlreadyExistsError]
        assert snapshot_tree(base_dir) == before
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "already exists" in err

    def test_missing_base_path(self, tmp_path: Path, capsys) -> None:
        code = main(["mygame", "--path", str(tmp_path / "missing")])

        assert code == EXIT_CODES[ProjectIOError]
        assert list(tmp_path.iterdir()) == []
        assert "IO error" in capsys.readouterr().err

    def test_unknown_template(self, base_dir: Path, capsys) -> None:
        code = main(["mygame", "--template", "fancy", "--path", str(base_dir)])

        assert code == EXIT_CODES[InvalidTemplateError]
        assert list(base_dir.iterdir()) == []
        assert "fancy" in capsys.readouterr().err

    def test_missing_name_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2


@pytest.mark.integration
class TestExitCodes:
    def test_codes_are_distinct_and_non_zero(self) -> None:
        codes = list(EXIT_CODES.values())
        assert len(codes) == len(set(codes))
        assert 0 not in codes
        assert 2 not in codes

    def test_exit_code_for_known_errors(self, tmp_path: Path) -> None:
        assert exit_code_for(ProjectAlreadyExistsError(tmp_path)) == 3
        assert exit_code_for(ProjectIOError(tmp_path, OSError(5, "boom"))) == 4
        assert exit_code_for(InvalidTemplateError("x")) == 5

    def test_exit_code_for_base_error(self) -> None:
        assert exit_code_for(CreateError("other")) == 1

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args(["mygame"])
        assert args.name == "mygame"
        assert args.template == "basic"
        assert args.path is None
