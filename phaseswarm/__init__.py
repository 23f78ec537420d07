#!/usr/bin/env python3
# phaseswarm/__init__.py
"""
PhaseSwarm installer.

Installs the PhaseSwarm prompt templates for Claude Code and reads the
local/global project registry. Subpackages expose their own APIs; keep this
module free of imports so that `phaseswarm.__version__` is cheap.
"""

__version__ = "1.1.0"
