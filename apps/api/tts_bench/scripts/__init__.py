"""Command-line utilities for operating the benchmark backend."""
