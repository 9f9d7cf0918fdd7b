"""I/O utilities.

Subpackages
-----------
- :mod:`cvengine.io.readers`: parsing adapters for input data formats
"""

from .readers import *  # noqa: F401,F403
