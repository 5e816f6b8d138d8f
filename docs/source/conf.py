"""Configuration file for the Sphinx documentation builder.

For the full list of built-in configuration values, see the
documentation:

https://www.sphinx-doc.org/en/master/usage/configuration.html
"""

import os
import sys

# Add the source directory to the system path.
sys.path.insert(0, os.path.abspath("../../src"))

# Set project information.
project = "QuadSphere"
copyright = "2024, QuadSphere Developers"
author = "QuadSphere Developers"

# Set general configuration options.
extensions = [
    "sphinx.ext.napoleon",
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.mathjax",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

nitpicky = True

# Set options for HTML output.
html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]

# Set options for autodoc.
# https://www.sphinx-doc.org/en/master/usage/extensions/autodoc.html

autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "special-members": "__init__",
    "undoc-members": True,
    "show-inheritance": True,
}

# Set options for napoleon.
# https://www.sphinx-doc.org/en/master/usage/extensions/napoleon.html

napoleon_google_docstring = False
napoleon_use_rtype = False
napoleon_preprocess_types = True
napoleon_type_aliases = {
    "ndarray": "numpy.ndarray",
    "array-like": ":term:`array-like <numpy:array_like>`",
}

# Set options for intersphinx. Types in the docstrings link to these.
# https://www.sphinx-doc.org/en/master/usage/extensions/intersphinx.html

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable", None),
    "scipy": ("https://docs.scipy.org/doc/scipy", None),
    "xarray": ("https://docs.xarray.dev/en/stable", None),
}

# Set options for myst_parser.
# https://myst-parser.readthedocs.io/en/latest/index.html

source_suffix = {".rst": "restructuredtext", ".txt": "markdown", ".md": "markdown"}
