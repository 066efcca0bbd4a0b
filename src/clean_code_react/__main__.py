import sys

from .server import boot

sys.exit(boot())
