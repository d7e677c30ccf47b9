from unittest.mock import patch

from feedforward.console import format_vector, paced_echo


def test_paced_echo_writes_whole_line(capsys):
    with patch("feedforward.console.time.sleep") as mock_sleep:
        paced_echo("Hello", delay_ms=33)

    assert capsys.readouterr().out == "Hello\n"
    assert mock_sleep.call_count == 5
    mock_sleep.assert_called_with(0.033)


def test_paced_echo_without_delay(capsys):
    with patch("feedforward.console.time.sleep") as mock_sleep:
        paced_echo("Starting Neural Network...", delay_ms=0)

    assert capsys.readouterr().out == "Starting Neural Network...\n"
    mock_sleep.assert_not_called()


def test_paced_echo_to_stderr(capsys):
    paced_echo("oops", delay_ms=0, err=True)
    captured = capsys.readouterr()
    assert captured.err == "oops\n"
    assert captured.out == ""


def test_format_vector():
    assert format_vector([0.5, 0.25]) == "[0.5, 0.25]"
    assert format_vector([0.123456, 1.0], precision=3) == "[0.123, 1.000]"
    assert format_vector([]) == "[]"
