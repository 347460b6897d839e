"""Solutions to classic string, linked-list, stack and queue problems."""

__version__ = "0.1.0"
__all__ = ["linked_list", "stacks", "strings"]