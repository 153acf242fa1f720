# tests/test_cli.py

import click
from click.testing import CliRunner

from file_organizer.cli.main import fo
from file_organizer.main import main


def test_organize_command(messy_folder, file_map_file, config_file):
    runner = CliRunner()
    result = runner.invoke(fo, ["organize", str(messy_folder), "--file-map", str(file_map_file),
                                "--config", str(config_file(False))])

    assert result.exit_code == 0
    assert "Organized 4 files successfully!" in result.output
    assert (messy_folder / "Images" / "holiday.jpg").exists()
    assert not (messy_folder / "backup").exists()


def test_organize_command_uses_config_backup_default(messy_folder, file_map_file, config_file):
    runner = CliRunner()
    result = runner.invoke(fo, ["organize", str(messy_folder), "--file-map", str(file_map_file),
                                "--config", str(config_file(True))])

    assert result.exit_code == 0
    assert (messy_folder / "backup").is_dir()


def test_organize_command_no_backup_overrides_config(messy_folder, file_map_file, config_file):
    runner = CliRunner()
    runner.invoke(fo, ["organize", str(messy_folder), "--no-backup", "--file-map", str(file_map_file),
                       "--config", str(config_file(True))])

    assert not (messy_folder / "backup").exists()


def test_organize_command_invalid_path(tmp_path, file_map_file):
    runner = CliRunner()
    result = runner.invoke(fo, ["organize", str(tmp_path / "nope"), "--no-backup", "--file-map", str(file_map_file)])

    assert result.exit_code == 1
    assert "Invalid path." in result.output


def test_open_config_command(monkeypatch, file_map_file):
    monkeypatch.setattr(click, "launch", lambda *a, **kw: 0)
    result = CliRunner().invoke(fo, ["open-config", "--file-map", str(file_map_file)])

    assert result.exit_code == 0
    assert "Opened config file" in result.output


def test_show_config_command(file_map_file, config_file):
    result = CliRunner().invoke(fo, ["show-config", "--file-map", str(file_map_file),
                                     "--config", str(config_file(True))])

    assert result.exit_code == 0
    assert "enableBackup: True" in result.output
    assert "Images" in result.output


def test_main_group_lists_modes():
    result = CliRunner().invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "gui" in result.output
    assert "cli" in result.output
    assert "--verbose" in result.output
