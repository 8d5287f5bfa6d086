import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "Urivalue"
copyright = "2026, Urivalue contributors"
author = "Urivalue contributors"
import urivalue  # noqa: E402

release = urivalue.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = []
exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

# Intersphinx mapping for external references
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Duplicate cross-reference warnings from re-exports in urivalue/__init__.py
suppress_warnings = ["ref.python"]

# Autodoc configuration
autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_class_content = "class"
autodoc_member_order = "bysource"

html_theme = "furo"
html_static_path = []
html_title = "Urivalue"
