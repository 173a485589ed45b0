import io
import json

import pytest

from json_messages import cli


def _run(argv):
    stdout = io.StringIO()
    message = cli.run(cli.build_parser().parse_args(argv), stdout=stdout)
    return message, json.loads(stdout.getvalue())


def test_prints_message_with_data(clean_env):
    message, payload = _run(["--api-version", "1.0", "--id", "987", "--data", '{"id": "1234"}'])

    assert payload == message.to_object()
    assert payload["id"] == "987"
    assert payload["data"] == {"id": "1234"}


def test_error_code_is_coerced_to_int(clean_env):
    _, payload = _run(["--api-version", "1.0", "--error-code", "404", "--error-message", "gone"])

    assert payload["error"] == {"code": 404, "message": "gone", "errors": None}


def test_falls_back_to_environment(clean_env):
    clean_env.setenv("JSON_MESSAGES_API_VERSION", "2.0")
    clean_env.setenv("JSON_MESSAGES_METHOD", "people.get")

    _, payload = _run(["--error-code", "NOT_FOUND"])

    assert payload["apiVersion"] == "2.0"
    assert payload["method"] == "people.get"
    assert payload["error"]["code"] == "NOT_FOUND"


def test_main_exits_2_without_api_version(clean_env):
    assert cli.main([]) == 2


def test_main_exits_2_on_invalid_data(clean_env, capsys):
    assert cli.main(["--api-version", "1.0", "--data", "{nope"]) == 2


def test_main_succeeds(clean_env, capsys):
    assert cli.main(["--api-version", "1.0", "--method", "Baz"]) == 0

    assert json.loads(capsys.readouterr().out)["method"] == "Baz"


def test_error_message_without_code_is_rejected(clean_env):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--api-version", "1.0", "--error-message", "gone"])

    assert exc_info.value.code == 2


def test_config_failure_is_logged_as_json(clean_env, capsys):
    assert cli.main([]) == 2

    line = capsys.readouterr().err.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "json_messages.cli"
    assert "JSON_MESSAGES_API_VERSION" in payload["message"]
