"""
Format and lint the source tree. With `--check`, only report problems (for CI).
"""

import subprocess
import sys
from typing import List

from rich import print as rprint

SOURCE_DIRS = ["jumper", "xontrib", "tests", "devtools"]


def lint_commands(check: bool) -> List[List[str]]:
    if check:
        return [
            ["usort", "check", *SOURCE_DIRS],
            ["ruff", "check", *SOURCE_DIRS],
            ["black", "--check", *SOURCE_DIRS],
        ]
    return [
        ["usort", "format", *SOURCE_DIRS],
        ["ruff", "check", "--fix", *SOURCE_DIRS],
        ["black", *SOURCE_DIRS],
    ]


def main(args: List[str]) -> int:
    failed: List[str] = []
    for cmd in lint_commands(check="--check" in args):
        rprint(f"[bold green]❯ {' '.join(cmd)}[/bold green]")
        if subprocess.run(cmd, text=True).returncode != 0:
            failed.append(cmd[0])
        rprint()

    if failed:
        rprint(f"[bold red]✗ Lint failed: {', '.join(failed)}[/bold red]")
        return 1
    rprint("[bold green]✔️ Lint passed![/bold green]")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))


## Tests


def test_lint_commands():
    assert [cmd[:2] for cmd in lint_commands(check=True)] == [
        ["usort", "check"],
        ["ruff", "check"],
        ["black", "--check"],
    ]
    assert all("--fix" not in cmd for cmd in lint_commands(check=True))
    assert ["ruff", "check", "--fix", *SOURCE_DIRS] in lint_commands(check=False)
