"""Console output for the CLI."""
