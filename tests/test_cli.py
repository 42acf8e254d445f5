"""Unit tests for termlaunch.cli."""

from unittest.mock import MagicMock, patch

import pytest

from termlaunch.cli import main
from termlaunch.models import TermlaunchConfig
from termlaunch.shells import LinuxShellBackend, UnsupportedPlatformError
from termlaunch.shells.linux import LinuxShell


def _launch_patches(backend, shell=None):
    return patch.multiple(
        "termlaunch.cli.launch",
        get_backend=MagicMock(return_value=backend),
        load_config=MagicMock(return_value=TermlaunchConfig(shell=shell)),
    )


def _spawned(spawn):
    return spawn.call_args.args[0]


# ---------------------------------------------------------------------------
# open (default command)
# ---------------------------------------------------------------------------


class TestOpen:
    def test_opens_default_shell_in_directory(self, make_backend, spawn, tmp_path):
        backend = make_backend("/usr/bin/gnome-terminal", "/usr/bin/xterm")
        with _launch_patches(backend):
            assert main([str(tmp_path)]) == 0

        assert _spawned(spawn).argv == [
            "/usr/bin/gnome-terminal",
            "--working-directory",
            str(tmp_path),
        ]

    def test_explicit_open_subcommand(self, make_backend, spawn, tmp_path):
        backend = make_backend("/usr/bin/gnome-terminal")
        with _launch_patches(backend):
            assert main(["open", str(tmp_path)]) == 0
        spawn.assert_called_once()

    def test_defaults_to_current_directory(self, make_backend, spawn, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        backend = make_backend("/usr/bin/xterm")
        with _launch_patches(backend, shell="XTerm"):
            assert main([]) == 0
        assert _spawned(spawn).cwd == str(tmp_path)

    def test_uses_configured_shell(self, make_backend, spawn, tmp_path):
        backend = make_backend("/usr/bin/gnome-terminal", "/usr/bin/konsole")
        with _launch_patches(backend, shell="Konsole"):
            assert main([str(tmp_path)]) == 0
        assert _spawned(spawn).shell is LinuxShell.KONSOLE

    def test_shell_flag_overrides_configured_shell(self, make_backend, spawn, tmp_path):
        backend = make_backend("/usr/bin/konsole", "/usr/bin/urxvt")
        with _launch_patches(backend, shell="Konsole"):
            assert main(["--shell", "URxvt", str(tmp_path)]) == 0
        assert _spawned(spawn).argv == ["/usr/bin/urxvt", "-cd", str(tmp_path)]

    def test_unknown_configured_label_uses_default(self, make_backend, spawn, tmp_path):
        backend = make_backend("/usr/bin/gnome-terminal", "/usr/bin/tilix")
        with _launch_patches(backend, shell="Retired Terminal"):
            assert main([str(tmp_path)]) == 0
        assert _spawned(spawn).shell is LinuxShell.GNOME

    def test_unknown_shell_flag_is_rejected(self, make_backend, spawn, tmp_path, capsys):
        with _launch_patches(make_backend("/usr/bin/xterm")):
            assert main(["--shell", "konsole", str(tmp_path)]) == 2
        assert "unknown terminal" in capsys.readouterr().err
        spawn.assert_not_called()

    def test_falls_back_to_first_installed_shell(self, make_backend, spawn, tmp_path, capsys):
        backend = make_backend("/usr/bin/konsole", "/usr/bin/xterm")
        with _launch_patches(backend, shell="Tilix"):
            assert main([str(tmp_path)]) == 0
        assert _spawned(spawn).shell is LinuxShell.KONSOLE
        assert "Tilix is not installed, using Konsole" in capsys.readouterr().err

    def test_nothing_installed(self, make_backend, spawn, tmp_path, capsys):
        with _launch_patches(make_backend()):
            assert main([str(tmp_path)]) == 1
        assert "no supported terminal" in capsys.readouterr().err
        spawn.assert_not_called()

    def test_missing_directory(self, make_backend, spawn, tmp_path, capsys):
        with _launch_patches(make_backend("/usr/bin/xterm")):
            assert main([str(tmp_path / "missing")]) == 2
        assert "is not a directory" in capsys.readouterr().err
        spawn.assert_not_called()

    def test_spawn_failure_is_reported(self, make_backend, spawn, tmp_path, capsys):
        spawn.side_effect = FileNotFoundError(2, "No such file or directory")
        with _launch_patches(make_backend("/usr/bin/gnome-terminal")):
            assert main([str(tmp_path)]) == 1
        assert "could not start GNOME Terminal" in capsys.readouterr().err

    def test_unsupported_platform(self, tmp_path, capsys):
        with patch(
            "termlaunch.cli.launch.get_backend",
            side_effect=UnsupportedPlatformError("No terminal backend for platform 'darwin'."),
        ):
            assert main([str(tmp_path)]) == 1
        assert "darwin" in capsys.readouterr().err

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "termlaunch" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


class TestList:
    def _run(self, backend, shell=None):
        with patch.multiple(
            "termlaunch.cli.listing",
            get_backend=MagicMock(return_value=backend),
            load_config=MagicMock(return_value=TermlaunchConfig(shell=shell)),
        ):
            return main(["list"])

    def test_lists_installed_shells_in_catalog_order(self, make_backend, capsys):
        backend = make_backend("/usr/bin/xterm", "/usr/bin/konsole")
        assert self._run(backend) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "  Konsole  /usr/bin/konsole",
            "  XTerm  /usr/bin/xterm",
        ]

    def test_marks_preferred_shell(self, make_backend, capsys):
        backend = make_backend("/usr/bin/xterm", "/usr/bin/konsole")
        assert self._run(backend, shell="XTerm") == 0
        assert "* XTerm  /usr/bin/xterm" in capsys.readouterr().out.splitlines()

    def test_nothing_installed(self, make_backend, capsys):
        assert self._run(make_backend()) == 0
        out = capsys.readouterr().out
        assert "No supported terminal emulators found." in out
        assert "GNOME Terminal" in out


# ---------------------------------------------------------------------------
# configure
# ---------------------------------------------------------------------------


class TestConfigure:
    @pytest.fixture(autouse=True)
    def linux_backend(self):
        with patch("termlaunch.cli.configure.get_backend", return_value=LinuxShellBackend()):
            yield

    def test_saves_known_shell(self, capsys):
        with patch("termlaunch.cli.configure.save_config") as mock_save:
            assert main(["configure", "--shell", "Konsole"]) == 0
        mock_save.assert_called_once_with(TermlaunchConfig(shell="Konsole"))
        assert "shell: Konsole" in capsys.readouterr().out

    def test_clear_shell(self, capsys):
        with patch("termlaunch.cli.configure.save_config") as mock_save:
            assert main(["configure", "--clear-shell"]) == 0
        mock_save.assert_called_once_with(TermlaunchConfig(shell=None))
        assert "default: GNOME Terminal" in capsys.readouterr().out

    def test_rejects_unknown_label(self, capsys):
        with patch("termlaunch.cli.configure.save_config") as mock_save:
            assert main(["configure", "--shell", "Alacritty"]) == 2
        mock_save.assert_not_called()
        assert "Choose one of: GNOME Terminal, Tilix" in capsys.readouterr().err

    def test_requires_an_option(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["configure"])
        assert exc_info.value.code == 2

    def test_write_failure(self, capsys):
        with patch("termlaunch.cli.configure.save_config", side_effect=PermissionError("denied")):
            assert main(["configure", "--shell", "XTerm"]) == 1
        assert "could not write" in capsys.readouterr().err
