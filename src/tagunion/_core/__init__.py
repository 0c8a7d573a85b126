from ._main import Pipeable

__all__ = ["Pipeable"]
