# tests/test_main.py

from __future__ import annotations

import athena.cli.main as cli_main


def test_corrupt_save_file_exits_with_status_1(settings, monkeypatch, capsys) -> None:
    settings.data_dir.mkdir(parents=True)
    settings.save_path.write_text("T|0|ok\nQ|0|??\n", "utf-8")
    settings.log_level = "WARNING"
    settings.log_dir = settings.data_dir / "logs"
    settings.log_to_file = False

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    # Keep pytest's own log capture handlers on the root logger.
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)

    def no_console(state):
        raise AssertionError("console must not start")

    monkeypatch.setattr(cli_main, "run_console_loop", no_console)

    assert cli_main.main() == 1
    err = capsys.readouterr().err
    assert "Fatal error" in err
    assert "athena.txt:2" in err


def test_clean_start_runs_console_and_returns_0(settings, monkeypatch) -> None:
    settings.log_level = "WARNING"
    settings.log_dir = settings.data_dir / "logs"
    settings.log_to_file = False
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)

    monkeypatch.setattr(cli_main.signal, "signal", lambda *args: None)

    started = []
    monkeypatch.setattr(cli_main, "run_console_loop", lambda state: started.append(state))

    assert cli_main.main() == 0
    assert len(started) == 1
    assert started[0].task_list.count() == 0
