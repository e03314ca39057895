"""opbuild CLI."""
