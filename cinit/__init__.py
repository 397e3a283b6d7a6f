"""c-init — scaffold a C project with a Makefile, flags and linter config."""

__version__ = "0.1.0"
