import json
from pathlib import Path

from typer.testing import CliRunner

from ischema.cli import app


def test_cli_init_and_build(project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["init", str(project)])
    assert result.exit_code == 0, result.output
    assert (project / "ischema.json").exists()

    result_build = runner.invoke(app, ["build", str(project)])
    assert result_build.exit_code == 0, result_build.output
    assert (project / "schemas" / "Foo.json").exists()
    assert (project / "schemas" / "Deep.json").exists()


def test_cli_init_refuses_to_overwrite(tmp_path: Path) -> None:
    runner = CliRunner()
    (tmp_path / "ischema.json").write_text('{"options": {"outDir": "keep"}}')
    result = runner.invoke(app, ["init", str(tmp_path)])
    assert result.exit_code == 1
    assert "keep" in (tmp_path / "ischema.json").read_text()

    forced = runner.invoke(app, ["init", str(tmp_path), "--force"])
    assert forced.exit_code == 0, forced.output
    assert "schemas" in (tmp_path / "ischema.json").read_text()


def test_cli_build_reports_rejected_schema(tmp_path: Path) -> None:
    (tmp_path / "bad.ts").write_text(
        "/* SCHEMA */\ninterface Broken {\n  when: Date;\n}\n/* END SCHEMA */\n"
    )
    runner = CliRunner()
    result = runner.invoke(app, ["build", str(tmp_path)])
    assert result.exit_code == 1
    assert "Broken" in result.output
    assert not (tmp_path / "Broken.json").exists()

    lenient = runner.invoke(app, ["build", str(tmp_path), "--no-validate"])
    assert lenient.exit_code == 0, lenient.output
    assert (tmp_path / "Broken.json").exists()


def test_cli_build_reports_bad_config(tmp_path: Path) -> None:
    (tmp_path / "ischema.json").write_text("{broken")
    result = CliRunner().invoke(app, ["build", str(tmp_path)])
    assert result.exit_code == 1


def test_cli_inspect_json(project: Path) -> None:
    result = CliRunner().invoke(
        app, ["inspect", str(project / "src" / "foo.ts"), "--json"]
    )
    assert result.exit_code == 0, result.output
    (schema,) = json.loads(result.output)
    assert schema["title"] == "Foo"


def test_cli_inspect_table(project: Path) -> None:
    result = CliRunner().invoke(app, ["inspect", str(project / "src" / "models" / "deep.ts")])
    assert result.exit_code == 0, result.output
    assert "Deep" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip()


def test_cli_config_schema(tmp_path: Path) -> None:
    out = tmp_path / "ischema.schema.json"
    result = CliRunner().invoke(app, ["config-schema", str(out)])
    assert result.exit_code == 0, result.output
    schema = json.loads(out.read_text())
    assert "options" in schema["properties"]
    assert "outDir" in schema["$defs"]["OptionsConfig"]["properties"]
