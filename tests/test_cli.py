"""Tests for the command-line entry points and the HTML visualizer."""

import json

import pytest
import yaml

from tilelayout import main as cli
from tilelayout import visualize
from tilelayout.visualizer import generate_visualizer
from tilelayout.workbench import Workbench


class TestLoadConfig:
    """Test cases for YAML config loading."""

    def test_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"grid_size": 9, "words": ["home", "love"]}), encoding="utf-8")

        config = cli.load_config(str(path))
        assert config.grid_size == 9
        assert config.words == ["home", "love"]

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert cli.load_config(str(path)).grid_size == 25

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            cli.load_config(str(tmp_path / "missing.yaml"))


class TestMain:
    """Test cases for the tilelayout CLI."""

    def test_words_option(self, capsys):
        assert cli.main(["--words", "HOME, LOVE"]) == 0

        out = capsys.readouterr().out
        assert "..........HOME..........." in out
        assert "Total tiles: 8" in out
        assert "Distribution: E:2  H:1  L:1  M:1  O:2  V:1" in out

    def test_word_file(self, tmp_path, capsys):
        path = tmp_path / "words.txt"
        path.write_text("cat\ntar\n", encoding="utf-8")

        assert cli.main([str(path), "--size", "5"]) == 0
        out = capsys.readouterr().out
        assert ".CAT." in out
        assert "Words: 2" in out

    def test_missing_word_file(self, tmp_path, capsys):
        assert cli.main([str(tmp_path / "missing.txt")]) == 1
        assert "Error reading words" in capsys.readouterr().err

    def test_add_words(self, capsys):
        assert cli.main(["--words", "HOME", "--add", "love", "--add", "home"]) == 0
        assert "Words: 2" in capsys.readouterr().out

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"grid_size": 5, "words": ["AB", "CD", "EF", "GH"]}), encoding="utf-8")

        assert cli.main(["--config", str(path)]) == 0
        assert "Dropped: GH" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"grid_size": 0}), encoding="utf-8")

        assert cli.main(["--config", str(path)]) == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_invalid_size(self, capsys):
        assert cli.main(["--size", "1"]) == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_suggest(self, capsys):
        assert cli.main(["--words", "LOVE", "--suggest"]) == 0
        out = capsys.readouterr().out
        assert "=== Suggestions ===" in out
        assert "(Match: " in out

    def test_output_and_resume(self, tmp_path, capsys):
        output = tmp_path / "layout.json"
        assert cli.main(["--words", "HOME, LOVE", "--output", str(output)]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["words"] == ["HOME", "LOVE"]

        assert cli.main(["--resume", str(output), "--add", "smile"]) == 0
        assert "Words: 3" in capsys.readouterr().out

    def test_resume_missing(self, tmp_path, capsys):
        assert cli.main(["--resume", str(tmp_path / "missing.json")]) == 1
        assert "Error resuming" in capsys.readouterr().err

    def test_visualize(self, tmp_path, capsys):
        output = tmp_path / "layout.json"
        assert cli.main(["--words", "HOME, LOVE", "-o", str(output), "--visualize"]) == 0

        assert (tmp_path / "layout.html").exists()
        assert "Visualizer generated" in capsys.readouterr().out


class TestVisualizer:
    """Test cases for the HTML visualizer."""

    @pytest.fixture
    def result_path(self, tmp_path):
        path = tmp_path / "layout.json"
        bench = Workbench.create(words=["HOME", "LOVE"])
        bench.save_result(path, bench.build(include_suggestions=True))
        return path

    def test_generate(self, result_path):
        html_path = generate_visualizer(result_path)
        assert html_path == result_path.with_suffix(".html")

        page = html_path.read_text(encoding="utf-8")
        assert "<title>HOME, LOVE</title>" in page
        assert '<div class="cell filled">H</div>' in page
        assert page.count('class="cell ') == 25 * 25
        assert "Total tiles: 8" in page
        assert "(Match: " in page
        assert "{{" not in page

    def test_custom_output(self, result_path, tmp_path):
        target = tmp_path / "html" / "page.html"
        assert generate_visualizer(result_path, target) == target
        assert target.exists()

    def test_cli(self, result_path, capsys):
        assert visualize.main([str(result_path)]) == 0
        assert "Visualizer generated" in capsys.readouterr().out

    def test_cli_missing_file(self, tmp_path, capsys):
        assert visualize.main([str(tmp_path / "missing.json")]) == 1
        assert "Results file not found" in capsys.readouterr().err
