"""
CLI main entry point.

Runs the typer app and turns its SystemExit into a return code.
"""


def main() -> int:
    """
    Main entry point for the rbaserun CLI.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    # Import here to keep package import light
    from .orchestrator import app

    try:
        app(prog_name="rbaserun")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
