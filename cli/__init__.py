"""Command line entry points for flist."""
