import json
import logging

import pytest

from abstract_factory import FactoryRegistry
from abstract_factory.cli import main

EXPECTED_OUTPUT = """\
Client: Testing client code with the first factory type:
The result of the product B1.
The result of the B1 collaborating with the (The result of the product A1.)

Client: Testing the same client code with the second factory type:
The result of the product B2.
The result of the B2 collaborating with the (The result of the product A2.)
"""


def test_default_run(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_single_variant(capsys):
    assert main(["--variant", "2"]) == 0
    assert capsys.readouterr().out == (
        "Client: Testing client code with the first factory type:\n"
        "The result of the product B2.\n"
        "The result of the B2 collaborating with the (The result of the product A2.)\n"
    )


def test_json_shortcut(capsys):
    assert main(["--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [run["variant"] for run in data["runs"]] == ["1", "2"]


def test_registered_family_is_a_choice(registered_third_factory, capsys):
    assert main(["-V", "3"]) == 0
    assert "The result of the B3 collaborating" in capsys.readouterr().out


def test_unknown_variant_is_rejected(capsys):
    try:
        main(["--variant", "9"])
    except SystemExit as e:
        assert e.code == 2
    else:
        raise AssertionError("argparse accepted an unknown variant")


def test_failure_exit_code(monkeypatch, capsys):
    monkeypatch.setenv("DEMO_VARIANTS", "9")
    assert main([]) == 1
    assert "Demo failed" in capsys.readouterr().err


def test_env_file(tmp_path, monkeypatch, capsys):
    env_file = tmp_path / ".env"
    env_file.write_text("DEMO_VARIANTS=1\n")
    assert main(["--env-file", str(env_file)]) == 0
    monkeypatch.delenv("DEMO_VARIANTS", raising=False)
    out = capsys.readouterr().out
    assert "B1" in out and "B2" not in out


def test_supported_variants_unchanged():
    assert FactoryRegistry.get_supported_variants() == ["1", "2"]


def test_env_file_sets_output_format(tmp_path, capsys):
    env_file = tmp_path / ".env"
    env_file.write_text("DEMO_FORMAT=json\n")
    assert main(["--env-file", str(env_file)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["total_runs"] == 2


def test_env_file_sets_log_level(tmp_path, capsys):
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=DEBUG\n")
    try:
        assert main(["-e", str(env_file)]) == 0
        assert logging.getLogger().level == logging.DEBUG
    finally:
        logging.getLogger().setLevel(logging.WARNING)


def test_format_flag_overrides_env(monkeypatch, capsys):
    monkeypatch.setenv("DEMO_FORMAT", "json")
    assert main(["--format", "text"]) == 0
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_unsupported_env_format_uses_text(monkeypatch, capsys):
    monkeypatch.setenv("DEMO_FORMAT", "yaml")
    assert main([]) == 0
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_version_names_app(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == "abstract-factory-demo (Abstract Factory Demo) 1.0.0"
