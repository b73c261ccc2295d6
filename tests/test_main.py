#!/usr/bin/env python3

"""End-to-end tests of the command line entry point."""

import json

import pytest

from interop_generator.infrastructure.config.compiler_config import DEFAULT_CONFIG
from interop_generator.infrastructure.logging import LoggerSetup
from interop_generator.main import main


@pytest.fixture(autouse=True)
def isolated_run(monkeypatch, tmp_path):
    """Run the CLI from an empty directory with logs kept under tmp_path."""
    names = ["METADATA_PATH", "OUTPUT_DIR", "VERBOSE"] + [f"INTEROP_{key}" for key in DEFAULT_CONFIG]
    for name in names:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.chdir(tmp_path)
    yield
    LoggerSetup.reset()


def _run(*argv: str) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
    return exc_info.value.code


class TestMain:
    """Exit codes and written files."""

    @pytest.mark.integration
    def test_generates_all_artifacts(self, metadata_file, tmp_path):
        output = tmp_path / "out"

        assert _run(str(metadata_file), "-o", str(output)) == 0

        assert sorted(p.name for p in output.iterdir()) == [
            "Game.Graphics.Camera.InteropGenerator.g.cs",
            "Game.Outer_Inner.InteropGenerator.g.cs",
            "InteropGenerator.Addresses.g.cs",
            "InteropGenerator.FixedSizeArrays.g.cs",
        ]
        fixed_arrays = (output / "InteropGenerator.FixedSizeArrays.g.cs").read_text(encoding="utf-8")
        assert fixed_arrays.count("FixedSizeArray32<T>") == 1
        log_file = LoggerSetup.get_log_file_path()
        assert log_file.parent == tmp_path / "logs"
        assert "Compilation complete: 2 structs" in log_file.read_text(encoding="utf-8")

    @pytest.mark.integration
    def test_namespace_and_pointer_size(self, metadata_file, tmp_path):
        output = tmp_path / "out"

        assert _run(str(metadata_file), "-o", str(output), "--namespace", "My.Interop", "--pointer-size", "4") == 0

        resolver = (output / "InteropGenerator.Addresses.g.cs").read_text(encoding="utf-8")
        camera = (output / "Game.Graphics.Camera.InteropGenerator.g.cs").read_text(encoding="utf-8")
        assert "namespace My.Interop;" in resolver
        assert "FieldOffsetAttribute(8)] public" in camera

    @pytest.mark.integration
    def test_metadata_path_from_env(self, metadata_file, tmp_path, monkeypatch):
        monkeypatch.setenv("METADATA_PATH", str(metadata_file))

        assert _run("--parallel") == 0
        assert (tmp_path / "generated" / "InteropGenerator.Addresses.g.cs").exists()

    @pytest.mark.integration
    def test_check_mode(self, metadata_file, tmp_path):
        output = tmp_path / "out"

        assert _run(str(metadata_file), "-o", str(output), "--check") == 1
        assert not output.exists()

        assert _run(str(metadata_file), "-o", str(output)) == 0
        assert _run(str(metadata_file), "-o", str(output), "--check") == 0

        (output / "InteropGenerator.Addresses.g.cs").write_text("// stale\n", encoding="utf-8")
        assert _run(str(metadata_file), "-o", str(output), "--check") == 1

    @pytest.mark.integration
    def test_malformed_signature_fails_but_writes_others(self, metadata_document, tmp_path):
        metadata_document["structs"][1]["static_addresses"][0]["signature"]["signature"] = "48 8B GG"
        path = tmp_path / "structs.json"
        path.write_text(json.dumps(metadata_document), encoding="utf-8")
        output = tmp_path / "out"

        assert _run(str(path), "-o", str(output)) == 1

        assert (output / "Game.Outer_Inner.InteropGenerator.g.cs").exists()
        assert not (output / "Game.Graphics.Camera.InteropGenerator.g.cs").exists()
        resolver = (output / "InteropGenerator.Addresses.g.cs").read_text(encoding="utf-8")
        assert "Camera" not in resolver

    @pytest.mark.integration
    @pytest.mark.parametrize(
        "content",
        ["{not json", json.dumps({"structs": [{"name": "A"}]}), json.dumps({"structs": []})],
        ids=["invalid-json", "schema-violation", "no-structs"],
    )
    def test_bad_metadata(self, content, tmp_path):
        path = tmp_path / "structs.json"
        path.write_text(content, encoding="utf-8")

        assert _run(str(path)) == 1

    @pytest.mark.integration
    def test_missing_metadata_file(self, tmp_path, capsys):
        assert _run(str(tmp_path / "missing.json")) == 1
        assert "Metadata file not found" in capsys.readouterr().err
