"""
CLI entry point.
"""


def main() -> None:
    """Console script entry point for auditdiff."""
    # Import here so `import auditdiff` does not pull in typer
    from .app import app

    app(prog_name="auditdiff")
