# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import init
from . import hash_object
from . import cat_file
from . import write_tree
from . import read_tree
from . import ls_tree
from . import config
