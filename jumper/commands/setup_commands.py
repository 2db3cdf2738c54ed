from pathlib import Path
from typing import Optional

from jumper.commands.command_registry import jumper_command
from jumper.config.logger import get_logger
from jumper.config.settings import global_settings
from jumper.errors import SetupError
from jumper.shell_integration.bash_script import BASH_SCRIPT, source_block
from jumper.text_ui.command_output import output, output_status

log = get_logger(__name__)


def write_script(script_path: Path) -> None:
    """
    Write the shell script, replacing any previous version.
    """
    try:
        script_path.parent.mkdir(parents=True, exist_ok=True)
        script_path.write_text(BASH_SCRIPT, encoding="utf-8")
    except OSError as e:
        raise SetupError(f"Error creating {script_path.name}: {e}") from e
    log.info("Wrote shell script: %s", script_path)


def install_to_rc_file(rc_path: Path, script_path: Path) -> bool:
    """
    Append a line sourcing the script to a shell init file, unless the file already
    mentions the script. Returns True if the file is now set up. Errors on this
    file are logged and reported as False so the caller can try the next one.
    """
    try:
        content = rc_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.error("Error reading %s: %s", rc_path.name, e)
        return False

    if str(script_path) in content:
        output("Jumper configuration already exists in %s", rc_path.name)
        return True

    try:
        with open(rc_path, "a", encoding="utf-8") as f:
            f.write(source_block(script_path))
    except OSError as e:
        log.error("Error writing to %s: %s", rc_path.name, e)
        return False

    output("Added jumper configuration to %s", rc_path.name)
    return True


def find_rc_files(home_dir: Path, candidates: list[str]) -> list[Path]:
    return [home_dir / name for name in candidates if (home_dir / name).exists()]


@jumper_command
def setup() -> Optional[Path]:
    """
    Install the `jp` shell function and completion. Writes the script to the jumper
    directory and sources it from the first shell init file found.
    """
    settings = global_settings()
    script_path = settings.script_path
    write_script(script_path)

    installed_in = None
    for rc_path in find_rc_files(settings.home_dir, settings.rc_files):
        if install_to_rc_file(rc_path, script_path):
            installed_in = rc_path
            break

    if not installed_in:
        log.warning(
            "No shell init file found to set up (tried %s)", ", ".join(settings.rc_files)
        )

    output_status("Setup complete! Please restart your shell or run:")
    output("source %s", script_path)
    return installed_in


## Tests


def test_install_to_rc_file(tmp_path):
    from jumper.text_ui.command_output import output_as_string

    script_path = tmp_path / ".jumper" / "jumper.sh"
    rc_path = tmp_path / ".bashrc"
    rc_path.write_text("export EDITOR=vi\n")

    out = output_as_string(install_to_rc_file, rc_path, script_path)
    assert out == "Added jumper configuration to .bashrc\n"
    assert rc_path.read_text() == (
        f"export EDITOR=vi\n\n# Jumper configuration\nsource {script_path}\n"
    )

    out = output_as_string(install_to_rc_file, rc_path, script_path)
    assert out == "Jumper configuration already exists in .bashrc\n"
    assert rc_path.read_text().count("source ") == 1


def test_find_rc_files(tmp_path):
    (tmp_path / ".bash_aliases").write_text("")
    assert find_rc_files(tmp_path, [".bashrc", ".bash_aliases"]) == [tmp_path / ".bash_aliases"]
    (tmp_path / ".bashrc").write_text("")
    assert find_rc_files(tmp_path, [".bashrc", ".bash_aliases"]) == [
        tmp_path / ".bashrc",
        tmp_path / ".bash_aliases",
    ]
