"""Mirror every repository of a GitHub account as bare, push-protected clones."""

__version__ = "0.1.0"
