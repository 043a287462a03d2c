# src/switchcase/table_config.py
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable, Dict, Hashable

import yaml

from switchcase.core import log
from switchcase.core.switch import HashSwitch

l = log.get("table_config")


def _imp(module: str, attr: str) -> Callable[[], Any]:
    mod = importlib.import_module(module)
    return getattr(mod, attr)


def table_from_dict(data: Dict[str, Any]) -> Dict[Any, Any]:
    """Build a HashSwitch table from parsed YAML.

    Each entry under `cases` needs a `key` and exactly one of `value`
    (used as-is) or `producer` ({module, attr}, imported and called on match).
    """
    cases = data.get("cases") if isinstance(data, dict) else None
    if not isinstance(cases, list):
        raise ValueError("case table needs a 'cases' list")

    table: Dict[Any, Any] = {}
    for i, entry in enumerate(cases):
        if not isinstance(entry, dict) or "key" not in entry:
            raise ValueError(f"cases[{i}] has no 'key'")
        key = entry["key"]
        if not isinstance(key, Hashable):
            raise ValueError(f"cases[{i}] key {key!r} is not hashable")
        if key in table:
            raise ValueError(f"cases[{i}] duplicate key {key!r}")

        has_value, has_producer = "value" in entry, "producer" in entry
        if has_value == has_producer:
            raise ValueError(f"cases[{i}] needs exactly one of 'value' or 'producer'")

        if has_producer:
            ref = entry["producer"]
            if not isinstance(ref, dict) or "module" not in ref or "attr" not in ref:
                raise ValueError(f"cases[{i}] producer needs 'module' and 'attr'")
            fn = _imp(ref["module"], ref["attr"])
            if not callable(fn):
                raise ValueError(f"cases[{i}] producer {ref['module']}.{ref['attr']} is not callable")
            table[key] = fn
        else:
            table[key] = entry["value"]

    l.debug("built case table with %d entries", len(table))
    return table


def load_table(yaml_path: str | Path) -> Dict[Any, Any]:
    """Read a case table YAML file."""
    data = yaml.safe_load(Path(yaml_path).read_text(encoding="utf-8"))
    return table_from_dict(data)


def build_from_yaml(yaml_path: str | Path, value: Any) -> HashSwitch:
    """Load the table at yaml_path and apply it to a HashSwitch on value."""
    return HashSwitch.make(value).hash_case(load_table(yaml_path))
