"""Tests for WGraphSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from wgraph.config.settings import WGraphSettings


class TestWGraphSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = WGraphSettings.from_cli(workspace_root=tmp_path)
        assert settings.workspace_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.graph.path == "graph.json"
        assert settings.graph.default_weight == 1.0
        assert settings.snapshot.indent == 2
        assert settings.snapshot.atomic is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = WGraphSettings.from_cli(workspace_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestGraphPath:
    def test_default(self, tmp_path: Path) -> None:
        assert WGraphSettings.from_cli(workspace_root=tmp_path).graph_path == tmp_path / "graph.json"

    def test_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "wgraph.toml").write_text('[graph]\npath = "data/city.json"\n')
        settings = WGraphSettings.from_cli(workspace_root=tmp_path)
        assert settings.graph_path == tmp_path / "data" / "city.json"

    def test_graph_file_wins(self, tmp_path: Path) -> None:
        (tmp_path / "wgraph.toml").write_text('[graph]\npath = "data/city.json"\n')
        settings = WGraphSettings.from_cli(workspace_root=tmp_path, graph_file=Path("other.json"))
        assert settings.graph_path == tmp_path / "other.json"

    def test_absolute_path(self, tmp_path: Path) -> None:
        absolute = tmp_path / "abs" / "g.json"
        settings = WGraphSettings.from_cli(workspace_root=tmp_path / "root", graph_file=absolute)
        assert settings.graph_path == absolute


class TestTomlSource:
    def test_sparse_override(self, tmp_path: Path) -> None:
        """Only overridden fields change — rest keeps defaults."""
        (tmp_path / "wgraph.toml").write_text("[snapshot]\nindent = 0\n")
        settings = WGraphSettings.from_cli(workspace_root=tmp_path)
        assert settings.snapshot.indent == 0
        assert settings.snapshot.atomic is True
        assert settings.graph.default_weight == 1.0

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "wgraph.toml").write_text("")
        settings = WGraphSettings.from_cli(workspace_root=tmp_path)
        assert settings.graph.path == "graph.json"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[graph]\ndefault_weight = 3.0\n")
        settings = WGraphSettings.from_cli(config_path=str(custom), workspace_root=tmp_path)
        assert settings.graph.default_weight == 3.0
        assert settings.config_path == custom

    def test_workspace_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "wgraph.toml").write_text("")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        monkeypatch.chdir(child)
        settings = WGraphSettings.from_cli()
        assert settings.workspace_root == tmp_path.resolve()
        assert settings.config_path == tmp_path.resolve() / "wgraph.toml"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "wgraph.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            WGraphSettings.from_cli(workspace_root=tmp_path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / "wgraph.toml").write_text("[graph]\ndefault_weight = -1\n")
        with pytest.raises(Exception):
            WGraphSettings.from_cli(workspace_root=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = WGraphSettings.from_cli(
            workspace_root=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
            log_json=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_none_flags_dropped(self, tmp_path: Path) -> None:
        settings = WGraphSettings.from_cli(workspace_root=tmp_path, graph_file=None)
        assert settings.graph_file is None

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "wgraph.toml").write_text("[graph]\ndefault_weight = 3.0\n")
        monkeypatch.setenv("WGRAPH_GRAPH__DEFAULT_WEIGHT", "7.5")
        settings = WGraphSettings.from_cli(workspace_root=tmp_path)
        assert settings.graph.default_weight == 7.5

    def test_env_flag(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WGRAPH_QUIET", "true")
        assert WGraphSettings.from_cli(workspace_root=tmp_path).quiet is True

    def test_cli_overrides_toml(self, tmp_path: Path) -> None:
        (tmp_path / "wgraph.toml").write_text("verbose = true\n")
        settings = WGraphSettings.from_cli(workspace_root=tmp_path, verbose=False)
        assert settings.verbose is False
