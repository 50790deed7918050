import datetime

import firefly

# -- Project information -----------------------------------------------------

project = "Firefly"
copyright = f"{datetime.date.today().year}, Firefly contributors"
author = "Firefly contributors"
release = version = firefly.__version__


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
}
autodoc_typehints_format = "short"
autodoc_member_order = "bysource"

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
