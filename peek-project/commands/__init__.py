# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import cat_file
from . import list_branches
from . import log
from . import commit_tree
from . import config
from . import interactive
