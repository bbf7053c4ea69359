# Configuration file for the Sphinx documentation builder.
#
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys
import datetime

sys.path.insert(0, os.path.abspath('../..'))

try:
    import importlib.metadata as metadata
except ImportError:
    import importlib_metadata as metadata

# -- Project information -----------------------------------------------------

project = 'gpmusic'
current_year = datetime.date.today().year
copyright = f'2022-{current_year}, CentraleSupelec'
author = 'Emmanuel Vazquez'
try:
    release = metadata.version('gpmusic')
except metadata.PackageNotFoundError:
    with open(os.path.join(os.path.dirname(__file__), '..', '..', 'VERSION')) as f:
        release = f.read().strip()
language = "en"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "numpydoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.mathjax",
]

templates_path = ['_templates']
source_suffix = [".rst", ".md"]
exclude_patterns = ["images"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
}

# -- Extensions -------------------------------------------------------------

autosummary_generate = True
numpydoc_class_members_toctree = False

# -- Options for HTML output -------------------------------------------------

html_theme = 'alabaster'
html_static_path = ["_static"]
html_theme_options = {
    "logo_name": True,
    "description": "GP regression and sampling for generative music",
    "font_family": "'Roboto', Georgia, sans",
    "head_font_family": "'Roboto', Georgia, serif",
    "code_font_family": "'Roboto Mono', 'Consolas', monospace",
}
