"""
Scrapbook package initializer.
Defines package version; the CLI entry point lives in scrapbook.cli.
"""
__version__ = "0.1.0"
