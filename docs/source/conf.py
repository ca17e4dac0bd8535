# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html
import os
import sys
from pathlib import Path
from sphinx.ext import apidoc

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information
project_path = Path(__file__).parent.parent.parent
on_rtd = os.environ.get('READTHEDOCS', None) == 'True'
sys.path.insert(0, str(project_path))

project = 'proximity'
release = "1.0.0"
# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

master_doc = 'index'
source_suffix = '.rst'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.viewcode',
]

exclude_patterns = ['_build', '**tests**', '**setup**', '**docs**']

autodoc_member_order = 'bysource'

apidoc_module_dir = "./../"
apidoc_output_dir = './source/'
apidoc_separate_modules = True
apidoc_excluded_paths = ['tests', 'setup.py']
autodoc_default_flags = ['members']
autoclass_content = 'both'
autosummary_generate = True
add_module_names = False
class_members_toctree = False
html_show_sourcelink = False

language = 'ru'

# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = 'sphinx_rtd_theme'

def setup(app):
    package_dir = '../proximity'
    if not on_rtd:
        apidoc.main([
            '-f', '-Var', '-E', '-M',
            '-o', './source/',
            package_dir,
        ])
