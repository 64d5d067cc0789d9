"""headr command-line interface.

``cli`` (the click command) and ``main`` (console-script entry point) are
resolved on first access, so ``python -m headr.cli.main`` runs without the
submodule already being imported.
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name == "cli":
        from .main import cli

        return cli
    if name == "main":
        from .main import main

        return main
    raise AttributeError(name)
