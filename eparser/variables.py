"""eparser/variables.py"""
from config.config import VARIABLE_CONFIG
from eparser.terms import VARIABLE_NAMES


class VariableStore:
    """单字母变量 -> float，未赋值的变量读取为NaN"""

    def __init__(self, values=None):
        self._values = {}
        for name, value in (values or {}).items():
            self.set(name, value)

    @staticmethod
    def _normalize_name(name):
        key = str(name).upper()
        if key not in VARIABLE_NAMES:
            raise ValueError(f"Unknown variable name: {name!r} (expected a single letter A-Z)")
        return key

    def set(self, name, value):
        """插入或更新"""
        self._values[self._normalize_name(name)] = float(value)

    def get(self, name):
        return self._values.get(self._normalize_name(name), VARIABLE_CONFIG["default_value"])

    def unset(self, name):
        self._values.pop(self._normalize_name(name), None)

    def clear(self):
        self._values.clear()

    def as_dict(self):
        return dict(self._values)

    def __contains__(self, name):
        return str(name).upper() in self._values

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"VariableStore({self._values})"
