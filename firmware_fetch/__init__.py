"""Fetch firmware sources from git repositories into a local workspace."""

import os

# git is located on our own search path; GitPython must not insist on PATH at import
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

__version__ = "0.1.0"
