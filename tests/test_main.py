"""
Tests for the command-line entry point.
"""

import pytest

import binos_main


class TestParseArgs:

    def test_defaults(self):
        args = binos_main.parse_args([])
        assert args.speed == 1.0
        assert args.log_file is None

    def test_speed_equals_form(self):
        assert binos_main.parse_args(['--speed=0.5']).speed == 0.5

    @pytest.mark.parametrize('value', ['fast', '-1'])
    def test_bad_speed_exits(self, value):
        with pytest.raises(SystemExit):
            binos_main.parse_args([f'--speed={value}'])

    def test_log_file(self):
        assert binos_main.parse_args(['--log-file', 'boot.log']).log_file == 'boot.log'


class TestMain:

    @pytest.fixture
    def quiet(self, monkeypatch, display):
        monkeypatch.setattr(binos_main, 'Display', lambda: display)
        monkeypatch.setattr('time.sleep', lambda seconds: None)
        return display

    def test_full_session(self, quiet, monkeypatch, tmp_path):
        answers = iter(['110', '011', 'xor'])
        monkeypatch.setattr(quiet.console, 'input', lambda prompt='': next(answers))
        log_path = tmp_path / 'run.log'

        binos_main.main(['--speed=0', '--log-file', str(log_path)])

        output = quiet.console.file.getvalue()
        assert 'Result: 101' in output
        assert 'Decimal: 5' in output
        assert 'Binary OS shutdown complete.' in output
        assert 'Operation XOR executed. Result: 101 (decimal 5)' in log_path.read_text(encoding='utf-8')

    def test_keyboard_interrupt_shuts_down(self, quiet, monkeypatch, tmp_path):
        def interrupt(prompt=''):
            raise KeyboardInterrupt

        monkeypatch.setattr(quiet.console, 'input', interrupt)
        binos_main.main(['--log-file', str(tmp_path / 'run.log')])

        output = quiet.console.file.getvalue()
        assert 'System shutdown requested...' in output
        assert 'Binary OS shutdown complete.' in output

    def test_closed_input_shuts_down(self, quiet, monkeypatch, tmp_path):
        def closed(prompt=''):
            raise EOFError

        monkeypatch.setattr(quiet.console, 'input', closed)
        binos_main.main(['--log-file', str(tmp_path / 'run.log')])
        assert 'Input closed' in quiet.console.file.getvalue()

    def test_unexpected_error_exits_with_status_1(self, quiet, monkeypatch, tmp_path):
        def explode(args, display):
            raise RuntimeError('no power')

        monkeypatch.setattr(binos_main, 'boot_system', explode)
        with pytest.raises(SystemExit) as excinfo:
            binos_main.main(['--log-file', str(tmp_path / 'run.log')])

        assert excinfo.value.code == 1
        assert 'System error: no power' in quiet.err_console.file.getvalue()
