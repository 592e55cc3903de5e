"""Nox sessions for running the spur-context test suite."""

from __future__ import annotations

import nox

PYTHON_VERSIONS = ("3.10", "3.11", "3.12", "3.13")


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the pytest suite under each supported interpreter."""

    session.install("-e", ".[test]")
    session.run("pytest", *session.posargs)
