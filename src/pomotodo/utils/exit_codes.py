"""
Process exit codes of pomotodo.

Scripts driving ``pomotodo replay`` can tell a bad intent file (2) or a
missing file (5) apart from a crash (1).
"""

SUCCESS = 0
ERROR_GENERAL = 1
# bad intent script, unknown output format, rejected config value
ERROR_INVALID_ARGS = 2
# script file or configuration key
ERROR_NOT_FOUND = 5

_NAMES = {
    value: name
    for name, value in list(globals().items())
    if name == "SUCCESS" or name.startswith("ERROR_")
}


def get_exit_code_name(code: int) -> str:
    """Name of an exit code for log lines, e.g. ``ERROR_NOT_FOUND``."""
    return _NAMES.get(code, f"UNKNOWN({code})")
