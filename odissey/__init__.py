"""
Odissey configuration core.

Parses the block-structured configuration of the odissey connection pooler.
"""

from .const import APP_VERSION

__version__ = APP_VERSION
