"""Two-stack sorting with the push_swap instruction set: parsing, stacks, sorting and a command."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "normalize", "sorting", "cli"]