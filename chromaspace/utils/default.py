from typing import Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def first_defined(*values: Optional[T]) -> Optional[T]:
    """Return the first value that is not None (explicit > stored > default)."""
    for value in values:
        if value is not None:
            return value
    return None
