import pytest

from quality_gate.config import GateConfig, load_config, parse_config
from quality_gate.errors import ConfigurationError


def test_missing_default_file_yields_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = load_config()

    assert config == GateConfig()
    assert config.rules == ("noAny", "noEval")
    assert config.reporters == ("console",)
    assert config.output_file == "violations.json"
    assert config.extension == ".ts"


def test_explicit_missing_file_is_an_error(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path / "absent.json")


def test_json_analyzerrc_is_accepted(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".analyzerrc").write_text(
        '{"rules": ["noEval"], "reporters": ["console", "json"], "outputFile": "out/v.json", "maxWorkers": 2}',
        encoding="utf-8",
    )

    config = load_config()

    assert config.rules == ("noEval",)
    assert config.reporters == ("console", "json")
    assert config.output_file == "out/v.json"
    assert config.max_workers == 2


def test_yaml_config_with_gate_entries(tmp_path):
    path = tmp_path / "gates.yaml"
    path.write_text(
        "rules:\n"
        "  - name: noAny\n"
        "    enabled: true\n"
        "  - name: noEval\n"
        "    enabled: false\n"
        "extension: tsx\n"
        "maxDepth: 8\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.rules == ("noAny",)
    assert config.extension == ".tsx"
    assert config.max_depth == 8


@pytest.mark.parametrize(
    "raw, message",
    [
        ({"rules": "noAny"}, "'rules' must be a list"),
        ({"rules": [{"enabled": True}]}, "missing 'name'"),
        ({"rules": [3]}, "Invalid rule entry"),
        ({"reporters": "console"}, "'reporters' must be a list"),
        ({"maxWorkers": 0}, "'maxWorkers' must be a positive integer"),
        ({"maxDepth": "deep"}, "'maxDepth' must be a positive integer"),
        ({"extension": "."}, "extension must not be empty"),
    ],
)
def test_invalid_values_are_rejected(raw, message):
    with pytest.raises(ConfigurationError, match=message):
        parse_config(raw)


def test_non_mapping_document_is_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- noAny\n- noEval\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping"):
        load_config(path)


def test_malformed_document_is_rejected(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"rules": [', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Cannot parse"):
        load_config(path)
