# dirmirror Output Module
# Rich console output

from dirmirror.output.console import Console

__all__ = [
    "Console",
]
