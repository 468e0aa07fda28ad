"""
Base record type and identifier normalisation.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional


def canonical_id(value: Any) -> Optional[str]:
    """Normalise an identifier so numbers and their text compare equal.
    
    ``7``, ``7.0``, ``"7"``, ``" 07 "`` and ``"7.0"`` all become ``"7"``.
    Non-numeric text is returned stripped. ``None`` has no canonical form
    and never matches anything.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    text = str(value).strip()
    try:
        number = Decimal(text)
    except InvalidOperation:
        return text
    if not number.is_finite() or number.adjusted() > 30:
        return text
    if number == number.to_integral_value():
        return str(int(number))
    return canonical_id(float(number))


def ids_equal(left: Any, right: Any) -> bool:
    """Loose identifier equality."""
    key = canonical_id(left)
    return key is not None and key == canonical_id(right)


class AbstractRecord:
    """Read-only view over one stored record of the dataset.
    
    The raw attributes are kept exactly as loaded so responses can carry
    fields the typed properties do not name.
    """
    
    entity_name = "Record"
    
    __slots__ = ("_data", "_key")
    
    def __init__(self, data: Mapping[str, Any]):
        object.__setattr__(self, "_data", dict(data))
        object.__setattr__(self, "_key", canonical_id(self._data.get("id")))
    
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} records are read-only")
    
    @property
    def id(self) -> Any:
        """The stored id, as it appears in the data file."""
        return self._data.get("id")
    
    @property
    def key(self) -> Optional[str]:
        """Canonical form of the id used for comparisons."""
        return self._key
    
    def get(self, field: str, default: Any = None) -> Any:
        """Read any stored attribute."""
        return self._data.get(field, default)
    
    def matches(self, field: str, value: Any) -> bool:
        """True when ``field`` loosely equals ``value``."""
        return ids_equal(self._data.get(field), value)
    
    def to_dict(self) -> Dict[str, Any]:
        """Copy of the stored attributes."""
        return dict(self._data)
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractRecord):
            return NotImplemented
        return type(self) is type(other) and self._data == other._data
    
    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key))
    
    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"
