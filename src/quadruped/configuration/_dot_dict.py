from typing import Any, Dict

from quadruped import labels


class DotDict:
    """
    A dictionary wrapper that allows dot notation access to nested dictionaries.
    This provides clean access like: config.legs.front_left.coxa_id
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    def __getattr__(self, key: str) -> Any:
        if key.startswith('_'):
            raise AttributeError(key)
        try:
            return self._wrap(self._data[key])
        except KeyError:
            raise AttributeError(labels.CONFIG_NO_ATTRIBUTE.format(key)) from None

    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access as well"""
        return self._wrap(self._data[key])

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Safe get with default value"""
        if key not in self._data:
            return default
        return self._wrap(self._data[key])

    def keys(self):
        return self._data.keys()

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to regular dictionary"""
        return self._data

    @staticmethod
    def _wrap(value: Any) -> Any:
        # nested dicts are wrapped so chained dot access keeps working
        if isinstance(value, dict):
            return DotDict(value)
        return value

    def __repr__(self) -> str:
        return f"DotDict({self._data})"
