"""Syntax tree for a small block language, with source printing and Blockly XML output."""

__version__ = "0.1.0"