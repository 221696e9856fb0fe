from .error_handler import cli_minipre_error_handler

__all__ = ["cli_minipre_error_handler"]
