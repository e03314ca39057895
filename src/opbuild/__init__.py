"""opbuild: cross-compile an operator binary and package it into an OCI image."""

__version__ = "0.1.0"
