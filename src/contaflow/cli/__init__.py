"""Command-line interface for contaflow."""
