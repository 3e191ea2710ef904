"""
wesh_lib - Library for the WeSh operational network shell

This package contains the branch tree, directive registry and REPL driver
behind the interactive shell, plus the route-table query it can run.
"""

__version__ = "0.1.0"
