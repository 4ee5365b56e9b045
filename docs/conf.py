"""Sphinx configuration for sparseindexed documentation."""

from importlib.metadata import version as get_version

# -- Project information -----------------------------------------------------
project = 'sparseindexed'
copyright = '2025, Anansi Development'
author = 'Anansi Development'
release = get_version('sparseindexed')
version = '.'.join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

exclude_patterns = ['_build']

# -- Options for HTML output -------------------------------------------------
html_theme = 'sphinx_rtd_theme'

# -- Intersphinx configuration -----------------------------------------------
intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
}

# -- Napoleon configuration --------------------------------------------------
napoleon_google_docstring = True
napoleon_numpy_docstring = False

# -- Autodoc configuration ---------------------------------------------------
autodoc_typehints = 'description'
autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'special-members': '__init__, __next__',
    'show-inheritance': True,
}
