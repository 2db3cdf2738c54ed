from jumper.errors import SelfExplanatoryError


def summarize_traceback(exception: Exception) -> str:
    """
    One-line-per-fact summary of an exception for the console. Self-explanatory
    errors are shown as their message alone. Others get the exception type.
    """
    exception_str = str(exception)
    lines = [
        line
        for line in exception_str.splitlines()
        if line.strip()
        and not line.lstrip().startswith("Traceback")
        and not line.lstrip().startswith("The above exception")
        and not line.startswith("    ")
    ]
    summary = "\n".join(lines)
    if isinstance(exception, SelfExplanatoryError):
        return summary
    exc_type = type(exception).__name__
    return f"{exc_type}: {summary}"


## Tests


def test_summarize_traceback():
    from jumper.errors import NotFound

    assert summarize_traceback(NotFound("Folder not found: proj")) == "Folder not found: proj"
    assert (
        summarize_traceback(PermissionError("Permission denied\n    at somewhere"))
        == "PermissionError: Permission denied"
    )
