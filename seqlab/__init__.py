"""Array- and linked-list-backed sequences in mutable and immutable flavours, with an interactive console."""

__version__ = "0.1.0"
__all__ = ["dynamic_array", "linked_list", "sequence", "cli"]