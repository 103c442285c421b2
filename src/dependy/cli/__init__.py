"""Command-line driver for the dependy resolver."""
