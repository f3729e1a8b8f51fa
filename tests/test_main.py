"""
Tests for the command line entry point.
"""

from unittest.mock import patch

from tinyshell.main import main


class TestMain:
    """Test cases for main()."""

    def test_unknown_encoding_exits_with_usage_error(self, capsys):
        assert main(["--encoding", "no-such-codec"]) == 2
        assert "Unknown encoding: no-such-codec" in capsys.readouterr().err

    def test_unknown_log_level_exits_with_usage_error(self, capsys):
        assert main(["--log-level", "chatty"]) == 2
        assert "Unknown log level: chatty" in capsys.readouterr().err

    def test_invalid_environment_exits_with_usage_error(self, monkeypatch, capsys):
        monkeypatch.setenv("TINYSHELL_CHUNK_SIZE", "zero")
        assert main([]) == 2
        assert "TINYSHELL_CHUNK_SIZE" in capsys.readouterr().err

    def test_runs_shell_until_input_closes(self):
        with patch("tinyshell.main.run_shell") as run_shell:
            run_shell.return_value = None
            with patch("tinyshell.main.asyncio.run") as run:
                assert main(["--log-level", "error", "--encoding", "latin-1"]) == 0

        container = run_shell.call_args.args[0]
        settings = container.get_settings()
        assert settings.encoding == "latin-1"
        assert settings.log_level == "ERROR"
        run.assert_called_once()

    def test_keyboard_interrupt(self):
        with patch("tinyshell.main.run_shell"), patch(
            "tinyshell.main.asyncio.run", side_effect=KeyboardInterrupt
        ):
            assert main([]) == 130
