"""
codeschema

Language-independent extraction of classes, methods, fields, documentation
and metrics from source code, for LLM-oriented tooling.
"""

__version__ = "0.1.0"
