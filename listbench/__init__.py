"""A dynamic array and singly and doubly linked lists, with interactive menus and a timing benchmark."""

__version__ = "0.1.0"
__all__ = ["arraylist", "singly", "doubly", "cli"]