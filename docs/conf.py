"""Sphinx configuration for jpdetect documentation."""

import jpdetect

project = "jpdetect"
copyright = "2026, jpdetect contributors"
author = "jpdetect contributors"
release = jpdetect.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

templates_path = ["_templates"]
exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
