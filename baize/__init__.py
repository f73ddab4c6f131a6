"""Core of a Markdown note editor: menu model, LaTeX rendering, logging and file helpers."""

__version__ = "0.1.0"