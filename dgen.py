'''
 _| _  _  _
(_|(_|(/_| |
    _|
record generator for test fixtures.
'''

from typing import Any, Dict, List, Optional
import numpy as np
from faker import Faker


class Generator:
    """
    turns a small schema into a record. a schema is one of:

    - a dict of field -> schema, giving a dict record
    - a faker provider name ('name', 'word', 'city' ...)
    - a (provider, kwargs) tuple, e.g. ('pyint', {'min_value': 1, 'max_value': 9})
    - {'_provider': 'choice', 'from': [...]} picks one value with numpy
    - {'_provider': 'ref', 'key': 'field'} copies an earlier field of the record
    - {'_provider': 'literal', 'value': x} is x itself
    - anything else is returned as-is
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, name: str, kwargs: Optional[Dict[str, Any]] = None) -> Any:
        method = getattr(self._fake, name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{name}'")
        return method(**(kwargs or {}))

    def _resolve(self, config: Dict[str, Any], record: Dict[str, Any]) -> Any:
        provider = config["_provider"]
        if provider == "choice":
            picked = config["from"][int(self._rng.integers(len(config["from"])))]
            return picked
        if provider == "ref":
            if config["key"] not in record:
                raise ValueError(f"reference to '{config['key']}' not found in record.")
            return record[config["key"]]
        if provider == "literal":
            return config["value"]
        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any, record: Optional[Dict[str, Any]] = None) -> Any:
        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._resolve(schema, record or {})
            built: Dict[str, Any] = {}
            for field, field_schema in schema.items():
                built[field] = self.create(field_schema, built)
            return built

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List[Any]:
        return [self._generator.create(self._schema) for _ in range(count)]


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
