import os

from jumper.config.settings import reset_global_settings
from jumper.main import main


def _store_text(home) -> str:
    return (home / ".jumper" / "folders").read_text()


def test_store_created_on_first_run(jumper_home, capsys):
    assert main(["list"]) == 0
    assert _store_text(jumper_home) == ""
    out = capsys.readouterr().out
    assert "No folders in jump list. Use 'jumper add' to add the current folder." in out


def test_add_list_remove_scenario(jumper_home, monkeypatch, capsys):
    proj = jumper_home / "home" / "u" / "proj"
    docs = jumper_home / "home" / "u" / "docs"
    proj.mkdir(parents=True)
    docs.mkdir(parents=True)

    monkeypatch.chdir(proj)
    proj_path = os.getcwd()
    assert main(["add"]) == 0
    assert capsys.readouterr().out == f"Added current folder to jump list: {proj_path}\n"

    assert main(["list"]) == 0
    assert capsys.readouterr().out == f"Available folders:\n1. {proj_path}\n"

    monkeypatch.chdir(docs)
    docs_path = os.getcwd()
    assert main(["add"]) == 0
    capsys.readouterr()

    assert main(["list"]) == 0
    assert capsys.readouterr().out == f"Available folders:\n1. {proj_path}\n2. {docs_path}\n"

    assert main(["remove", "1"]) == 0
    assert capsys.readouterr().out == f"Removed folder: {proj_path}\n"

    assert main(["list"]) == 0
    assert capsys.readouterr().out == f"Available folders:\n1. {docs_path}\n"
    assert _store_text(jumper_home) == f"{docs_path}\n"


def test_add_twice_keeps_one_entry(jumper_home, monkeypatch, capsys):
    monkeypatch.chdir(jumper_home)
    cwd = os.getcwd()
    assert main(["add"]) == 0
    assert main(["add"]) == 0
    assert _store_text(jumper_home) == f"{cwd}\n"
    assert capsys.readouterr().out.endswith(f"Current folder already in the list: {cwd}\n")


def test_jump_prints_path_without_newline(jumper_home, capsys):
    (jumper_home / ".jumper").mkdir(exist_ok=True)
    (jumper_home / ".jumper" / "folders").write_text("/a/b\n/c/d\n")

    assert main(["1"]) == 0
    assert capsys.readouterr() == ("/a/b", "")

    assert main(["d"]) == 0
    assert capsys.readouterr().out == "/c/d"

    assert main(["/a/b"]) == 0
    assert capsys.readouterr().out == "/a/b"


def test_jump_failure_is_silent(jumper_home, capsys):
    (jumper_home / ".jumper").mkdir(exist_ok=True)
    (jumper_home / ".jumper" / "folders").write_text("/a/b\n")

    assert main(["99"]) != 0
    assert main(["nothing"]) != 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_remove_not_found(jumper_home, capsys):
    (jumper_home / ".jumper").mkdir(exist_ok=True)
    (jumper_home / ".jumper" / "folders").write_text("/a/b\n/c/d\n")

    assert main(["remove", "3"]) == 1
    assert main(["remove", "zzz"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Folder not found: 3" in captured.err
    assert "Folder not found: zzz" in captured.err
    assert _store_text(jumper_home) == "/a/b\n/c/d\n"


def test_remove_by_name_shifts_indices(jumper_home, capsys):
    (jumper_home / ".jumper").mkdir(exist_ok=True)
    (jumper_home / ".jumper" / "folders").write_text("/a/b\n/c/d\n/e/f\n")

    assert main(["remove", "b"]) == 0
    capsys.readouterr()
    assert main(["1"]) == 0
    assert capsys.readouterr().out == "/c/d"
    assert main(["2"]) == 0
    assert capsys.readouterr().out == "/e/f"


def test_usage_errors(jumper_home, capsys):
    assert main(["remove"]) == 2
    assert "Usage: jumper remove <folder-name-or-number>" in capsys.readouterr().err

    assert main([]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage: jumper <command>" in captured.err
    for name in ["add", "list", "remove", "setup"]:
        assert f"  {name} " in captured.err


def test_dash_tokens_are_folders(jumper_home, capsys):
    (jumper_home / ".jumper").mkdir(exist_ok=True)
    (jumper_home / ".jumper" / "folders").write_text("/x/-proj\n")

    assert main(["-proj"]) == 0
    assert capsys.readouterr() == ("/x/-proj", "")

    # No options: anything unmatched is a silent failed jump, never text for `cd`.
    for token in ["--help", "-h", "--version", "--nope"]:
        assert main([token]) == 1
        assert capsys.readouterr() == ("", "")


def test_undecodable_store(jumper_home, capsys):
    (jumper_home / ".jumper").mkdir(exist_ok=True)
    (jumper_home / ".jumper" / "folders").write_bytes(b"/a/\xff\xfe\n")

    assert main(["list"]) == 1
    assert "Could not read bookmark file" in capsys.readouterr().err
    assert main(["1"]) == 1
    assert capsys.readouterr() == ("", "")


def test_invalid_log_level(jumper_home, monkeypatch, capsys):
    monkeypatch.setenv("JUMPER_LOG_LEVEL", "loud")
    reset_global_settings()

    assert main(["list"]) == 1
    assert "Invalid log level: `loud`" in capsys.readouterr().err


def test_store_read_error(jumper_home, capsys):
    (jumper_home / ".jumper" / "folders").mkdir(parents=True)

    assert main(["list"]) == 1
    assert "Could not read bookmark file" in capsys.readouterr().err
    assert main(["1"]) == 1
    assert capsys.readouterr().out == ""
