import os
import sys

_THIS_DIR = os.path.dirname(os.path.realpath(__file__))
_PROJECT_DIR = os.path.normpath(os.path.join(_THIS_DIR, '..'))

# ensure "ttbindecode" python package is importable
sys.path.insert(0, _PROJECT_DIR)

# import project's info (name, version, ...)
_ABOUT = {}
with open(os.path.join(_PROJECT_DIR, 'ttbindecode', '__version__.py'),
          mode='r', encoding='utf-8') as f:
    exec(f.read(), _ABOUT)


#-------------------------------------------------------------------------------
project = _ABOUT['__fancy_title__']
copyright = _ABOUT['__copyright__']
author = _ABOUT['__author__']
version = _ABOUT['__version__']
release = _ABOUT['__version__']

extensions = ['sphinx.ext.autodoc', 'sphinx.ext.intersphinx']

source_suffix = '.rst'
master_doc = 'index'

exclude_patterns = ['_build', '**/.git']

rst_epilog = """
.. |project| replace:: {title}

.. |version| replace:: **v{version}**
""".format(
    title=_ABOUT['__fancy_title__'],
    version=_ABOUT['__version__'])

primary_domain = 'py'
default_role = 'any'

pygments_style = 'sphinx'

# ext.autodoc config
autodoc_member_order = 'bysource'
autodoc_default_options = {'members': True, 'undoc-members': True}

# ext.intersphinx config
intersphinx_mapping = {'python': ('https://docs.python.org/3', None)}


html_theme = 'sphinx_rtd_theme'
html_title = _ABOUT['__fancy_title__']
html_short_title = _ABOUT['__fancy_title__']
html_show_sourcelink = False
html_show_sphinx = False
html_show_copyright = True
