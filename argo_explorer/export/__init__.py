"""
Export module for delimited text downloads.

Exports:
    to_delimited_text: Render floats or measurements as comma-delimited text
    export_filename: Suggested download filename
    ExportKind: Which record layout to use
"""

from argo_explorer.export.delimited import ExportKind, export_filename, to_delimited_text

__all__ = [
    "to_delimited_text",
    "export_filename",
    "ExportKind",
]
