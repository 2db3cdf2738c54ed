from jumper.main import main
from jumper.shell_integration.bash_script import BASH_SCRIPT


def test_setup_writes_script_and_sources_it(jumper_home, capsys):
    (jumper_home / ".bash_aliases").write_text("alias ll='ls -l'\n")
    script_path = jumper_home / ".jumper" / "jumper.sh"

    assert main(["setup"]) == 0
    assert script_path.read_text() == BASH_SCRIPT
    assert (jumper_home / ".bash_aliases").read_text() == (
        f"alias ll='ls -l'\n\n# Jumper configuration\nsource {script_path}\n"
    )
    out = capsys.readouterr().out
    assert "Added jumper configuration to .bash_aliases" in out
    assert f"source {script_path}" in out

    assert main(["setup"]) == 0
    assert "Jumper configuration already exists in .bash_aliases" in capsys.readouterr().out
    assert (jumper_home / ".bash_aliases").read_text().count("# Jumper configuration") == 1


def test_setup_prefers_first_rc_file(jumper_home, capsys):
    (jumper_home / ".bashrc").write_text("")
    (jumper_home / ".bash_aliases").write_text("")

    assert main(["setup"]) == 0
    assert "source " in (jumper_home / ".bashrc").read_text()
    assert (jumper_home / ".bash_aliases").read_text() == ""


def test_setup_without_rc_files(jumper_home, capsys):
    assert main(["setup"]) == 0
    assert (jumper_home / ".jumper" / "jumper.sh").exists()
    captured = capsys.readouterr()
    assert "Setup complete!" in captured.out
    assert "No shell init file found" in captured.err
