'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from runqy import from_iterable, Enumerable
from typing import Any, Dict, List, Optional


class Generator:
    """
    seeded schema interpreter. a schema is one of:
      - 'word'                               a faker provider name, called without arguments
      - ('pyint', {'min_value': 1, ...})     a faker provider with keyword arguments
      - {'_dgen_provider': 'choice', 'from': [...]}
      - {'_dgen_provider': 'literal', 'value': ...}
      - {'field': <schema>, ...}             a record, each field generated in turn
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_dgen_provider"]
        if provider == "choice":
            # index with a plain int so the picked value keeps its native python type
            options = config["from"]
            return options[int(self._rng.integers(len(options)))]
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_dgen_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _dgen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_dgen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            return self._call_faker(schema)

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        return schema

    def length(self, min_length: int, max_length: int) -> int:
        return int(self._rng.integers(min_length, max_length, endpoint=True))


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        """generate `count` values eagerly, so the result is stable across traversals"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


class _SequenceProvider:
    def __init__(self, schema: Any, min_length: int, max_length: int, seed: Optional[int] = None):
        if min_length < 0 or max_length < min_length:
            raise ValueError("expected 0 <= min_length <= max_length")
        self._schema = schema
        self._min_length = min_length
        self._max_length = max_length
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        """`count` random sequences, each a list with a random length in [min_length, max_length]"""
        samples: List[List[Any]] = []
        for _ in range(count):
            length = self._generator.length(self._min_length, self._max_length)
            samples.append([self._generator.create(self._schema) for _ in range(length)])
        return from_iterable(samples)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def sequences_of(schema: Any, min_length: int = 0, max_length: int = 20,
                 seed: Optional[int] = None) -> _SequenceProvider:
    """
    sample source for property-style tests: many random sequences of schema values.
    example: sequences_of(('pyint', {'min_value': 1, 'max_value': 10}), seed=7).take(200)
    """
    return _SequenceProvider(schema, min_length, max_length, seed)
