"""Sphinx configuration for utf8codec documentation."""

import sys
from pathlib import Path

# Build from a source checkout without installing the package.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

import utf8codec  # noqa: E402

project = "utf8codec"
copyright = "2026, utf8codec contributors"
author = "utf8codec contributors"
release = utf8codec.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

exclude_patterns = ["_build"]

html_theme = "furo"
html_title = f"utf8codec {release}"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "show-inheritance": True,
}

# Only the Python prompt is stripped from copied examples.
copybutton_prompt_text = ">>> "
