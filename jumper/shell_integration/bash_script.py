"""
The bash script that wraps the `jumper` executable in a `jp` function, with
completion of folder names for `jp` and `jumper`.
"""

from pathlib import Path

from jumper.config.settings import APP_NAME

SHELL_FUNCTION_NAME = "jp"

BASH_SCRIPT = """#!/bin/bash

# Function to jump to a folder
jp() {
    if [ -z "$1" ]; then
        jumper list
        return
    fi

    local target
    target=$(jumper "$1")
    if [ $? -eq 0 ]; then
        cd "$target"
    fi
}

# Folder names from the jump list, for completion
_jp_folder_names() {
    jumper list | sed -n 's/^[0-9]*\\. \\(.*\\)$/\\1/p' | sed 's:/*$::; s:.*/::'
}

# Bash completion for jp
_jp_complete() {
    local cur prev
    COMPREPLY=()
    cur="${COMP_WORDS[COMP_CWORD]}"
    prev="${COMP_WORDS[COMP_CWORD-1]}"

    if [ "$prev" = "jumper" ]; then
        COMPREPLY=( $(compgen -W "add list remove setup" -- "$cur") )
    elif [ "$prev" = "remove" ] || [ "$prev" = "jp" ]; then
        local folders
        folders=$(_jp_folder_names)
        COMPREPLY=( $(compgen -W "$folders" -- "$cur") )
    fi

    return 0
}

complete -F _jp_complete jp
complete -F _jp_complete jumper
"""

RC_FILE_MARKER = f"# {APP_NAME.capitalize()} configuration"


def source_block(script_path: Path) -> str:
    """
    Lines appended to a shell init file to load the script.
    """
    return f"\n{RC_FILE_MARKER}\nsource {script_path}\n"


## Tests


def test_bash_script():
    assert "local target\n    target=$(jumper \"$1\")" in BASH_SCRIPT
    assert "complete -F _jp_complete jp\n" in BASH_SCRIPT
    # Escapes survive into the script text.
    assert r"sed -n 's/^[0-9]*\. \(.*\)$/\1/p'" in BASH_SCRIPT
    assert source_block(Path("/home/u/.jumper/jumper.sh")) == (
        "\n# Jumper configuration\nsource /home/u/.jumper/jumper.sh\n"
    )
