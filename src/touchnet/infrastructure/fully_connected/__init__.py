from ._dense import Dense

__all__ = [Dense.__name__]
