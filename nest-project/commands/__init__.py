# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import init
from . import open
from . import open_or_init
