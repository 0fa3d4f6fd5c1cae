import pytest

import crocodoc.cli as cli
from crocodoc.exceptions import APIError
from crocodoc.transport import CrocodocTransport

pytestmark = [pytest.mark.unit]

UUID = "8e5b0721-26c4-11df-b354-002170de47d3"


@pytest.fixture
def mock_request(mocker, monkeypatch):
    monkeypatch.setenv("CROCODOC_API_TOKEN", "test-token")
    return mocker.patch.object(
        CrocodocTransport, "request", autospec=True, return_value=b"payload"
    )


def test_document_with_options_writes_file(mock_request, tmp_path):
    output = tmp_path / "out" / "doc.pdf"

    exit_code = cli.main(
        [
            "document",
            UUID,
            "--pdf",
            "--annotated",
            "--filter",
            "1",
            "--filter",
            "2",
            "-o",
            str(output),
        ]
    )

    assert exit_code == 0
    assert output.read_bytes() == b"payload"
    _transport, resource, params, body, expect_json = mock_request.call_args.args
    assert resource == "document"
    assert params == {"uuid": UUID, "pdf": "true", "annotated": 1, "filter": "1,2"}
    assert body is None
    assert expect_json is False


def test_text_writes_to_stdout(mock_request, capsysbinary):
    assert cli.main(["text", UUID]) == 0

    assert capsysbinary.readouterr().out == b"payload"
    assert mock_request.call_args.args[1:] == ("text", {"uuid": UUID}, None, False)


def test_thumbnail_size(mock_request, tmp_path):
    output = tmp_path / "thumb.png"

    assert (
        cli.main(
            ["thumbnail", UUID, "--width", "200", "--height", "150", "-o", str(output)]
        )
        == 0
    )

    assert mock_request.call_args.args[2] == {"uuid": UUID, "size": "200x150"}


def test_invalid_thumbnail_width_fails_without_request(mock_request, mocker):
    mock_error = mocker.patch("crocodoc.cli.log_utils.logger.error")

    exit_code = cli.main(["thumbnail", UUID, "--width", "0", "--height", "10"])

    assert exit_code == 1
    mock_request.assert_not_called()
    assert "invalid_width" in mock_error.call_args.args[0]


def test_api_error_returns_one(mock_request):
    mock_request.side_effect = APIError(
        "server_error_404_not_found", "CrocodocTransport", "download/text"
    )

    assert cli.main(["text", UUID]) == 1


def test_missing_token_returns_one(mocker):
    mock_error = mocker.patch("crocodoc.cli.log_utils.logger.error")

    assert cli.main(["text", UUID]) == 1
    assert "API token" in mock_error.call_args.args[0]


def test_log_level_option(mock_request, mocker):
    mock_set_level = mocker.patch("crocodoc.cli.log_utils.set_log_level")

    cli.main(["--log-level", "DEBUG", "text", UUID])

    mock_set_level.assert_called_once_with("DEBUG")


def test_non_integer_width_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["thumbnail", UUID, "--width", "wide"])

    assert excinfo.value.code == 2


def test_command_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2


def test_log_file_option_enables_file_logging(mock_request, mocker, tmp_path):
    mock_add_file_logging = mocker.patch("crocodoc.cli.log_utils.add_file_logging")

    exit_code = cli.main(
        ["--log-file", str(tmp_path), "text", UUID, "-o", str(tmp_path / "t.txt")]
    )

    assert exit_code == 0

    mock_add_file_logging.assert_called_once_with(tmp_path, "INFO")


def test_log_file_option_uses_log_level(mock_request, mocker, tmp_path):
    mocker.patch("crocodoc.cli.log_utils.set_log_level")
    mock_add_file_logging = mocker.patch("crocodoc.cli.log_utils.add_file_logging")

    cli.main(
        [
            "--log-level",
            "DEBUG",
            "--log-file",
            str(tmp_path),
            "text",
            UUID,
            "-o",
            str(tmp_path / "t.txt"),
        ]
    )

    mock_add_file_logging.assert_called_once_with(tmp_path, "DEBUG")


def test_no_file_logging_by_default(mock_request, mocker, tmp_path):
    mock_add_file_logging = mocker.patch("crocodoc.cli.log_utils.add_file_logging")

    cli.main(["text", UUID, "-o", str(tmp_path / "t.txt")])

    mock_add_file_logging.assert_not_called()
