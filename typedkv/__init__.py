"""
TypedKV: Type-Aware In-Memory Key-Value Store

An in-process key-value store whose values carry an explicit type tag
(string, integer, float, boolean), driven by a line-based command
interpreter.
"""

__version__ = "1.0.0"
