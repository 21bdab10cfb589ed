from .strings import capitalize_first_letter

__all__ = ["capitalize_first_letter"]
