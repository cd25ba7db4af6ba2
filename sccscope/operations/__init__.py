from .compare import compare

__all__ = ["compare"]
