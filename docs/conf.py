"""Sphinx configuration."""

# -- Project information -----------------------------------------------------

project = "imagemanager"
author = "imagemanager developers"
copyright = "2026, imagemanager developers"  # noqa: A001

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinxcontrib.autodoc_pydantic",
    "sphinx.ext.autosectionlabel",
    "sphinx_copybutton",
    "myst_nb",
]

exclude_patterns = [
    "_build",
    "Thumbs.db",
    ".DS_Store",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "pydantic": ("https://docs.pydantic.dev/latest/", None),
}

pygments_style = "vs"
pygments_dark_style = "material"

autodoc_typehints = "description"
autodoc_typehints_format = "short"
autodoc_member_order = "groupwise"
autoclass_content = "class"
autosectionlabel_prefix_document = True

autodoc_pydantic_field_swap_name_and_alias = True
autodoc_pydantic_field_show_alias = False
autodoc_pydantic_model_show_config_summary = False
autodoc_pydantic_model_show_field_summary = False

html_theme = "furo"

myst_heading_anchors = 2

# sphinx-copybutton configurations
copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True

nb_execution_mode = "off"
