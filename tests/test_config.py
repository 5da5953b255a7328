"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pliprep.cli import build_parser, load_config, resolve_options
from pliprep.errors import ConfigError


def _options(tmp_path: Path, *extra: str):
    src = tmp_path / "prog.pli"
    src.write_text("")
    ns = build_parser().parse_args([str(src), *extra])
    return resolve_options(ns)


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[run]\nstrict = true\n")
        result = load_config(cfg, tmp_path)
        assert result["run"] == {"strict": True}

    def test_auto_discover_pliprep_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "pliprep.toml"
        cfg.write_text('[gate]\nextensions = [".inc"]\n')
        result = load_config(None, tmp_path)
        assert result["gate"] == {"extensions": [".inc"]}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "pliprep.toml"
        cfg.write_text("[run\nstrict = \n")
        with pytest.raises(ConfigError):
            load_config(None, tmp_path)


class TestConfigMerge:
    def test_defaults(self, tmp_path: Path) -> None:
        opts = _options(tmp_path)
        assert opts.extensions == (".pp", ".pli")
        assert opts.log_file is None
        assert opts.verbose is False
        assert opts.strict is False
        assert opts.dry_run is False

    def test_config_extensions(self, tmp_path: Path) -> None:
        (tmp_path / "pliprep.toml").write_text('[gate]\nextensions = ["PLI", "inc"]\n')
        assert _options(tmp_path).extensions == (".pli", ".inc")

    def test_cli_overrides_config_extensions(self, tmp_path: Path) -> None:
        (tmp_path / "pliprep.toml").write_text('[gate]\nextensions = [".inc"]\n')
        assert _options(tmp_path, "--extension", "cpy").extensions == (".cpy",)

    def test_config_extensions_must_be_strings(self, tmp_path: Path) -> None:
        (tmp_path / "pliprep.toml").write_text("[gate]\nextensions = [1, 2]\n")
        with pytest.raises(ConfigError):
            _options(tmp_path)

    def test_empty_extensions_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "pliprep.toml").write_text("[gate]\nextensions = []\n")
        with pytest.raises(ConfigError):
            _options(tmp_path)

    def test_config_log_relative_to_input(self, tmp_path: Path) -> None:
        (tmp_path / "pliprep.toml").write_text('[report]\nlog = "run.log"\n')
        assert _options(tmp_path).log_file == tmp_path / "run.log"

    def test_cli_overrides_config_log(self, tmp_path: Path) -> None:
        (tmp_path / "pliprep.toml").write_text('[report]\nlog = "run.log"\n')
        assert _options(tmp_path, "-l", "other.log").log_file == Path("other.log")

    def test_config_verbose_and_strict(self, tmp_path: Path) -> None:
        (tmp_path / "pliprep.toml").write_text(
            "[report]\nverbose = true\n\n[run]\nstrict = true\n"
        )
        opts = _options(tmp_path)
        assert opts.verbose is True
        assert opts.strict is True

    def test_non_bool_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "pliprep.toml").write_text("[report]\nverbose = 1\n")
        with pytest.raises(ConfigError):
            _options(tmp_path)

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "elsewhere.toml"
        cfg.write_text("[run]\nstrict = true\n")
        assert _options(tmp_path, "--config", str(cfg)).strict is True

    def test_gate_uses_config_extensions(self, tmp_path: Path) -> None:
        from pliprep.cli import main

        (tmp_path / "pliprep.toml").write_text('[gate]\nextensions = [".inc"]\n')
        src = tmp_path / "copy.inc"
        src.write_text("X;\n")
        assert main([str(src), "--dry-run"]) == 0
        assert main([str(tmp_path / "prog.pli"), "--dry-run"]) == 1
