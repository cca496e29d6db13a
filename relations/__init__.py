"""Relation modules.

Each known relation variant is a Relation subclass. A circuit is checked
against exactly one of them, selected by name when the circuit is configured
(CircuitSchema.relation).
"""

from .arithmetic import ArithmeticRelation
from .base import Relation, RelationParameters, RowValues
from .fibonacci import FibonacciRelation
from .zero import ZeroRelation

# Registry mapping relation names to relation classes
RELATION_REGISTRY: dict[str, type[Relation]] = {
    "zero": ZeroRelation,
    "fibonacci": FibonacciRelation,
    "arithmetic": ArithmeticRelation,
}


def get_relation(name: str, **kwargs) -> Relation:
    """Get relation instance by registry name.

    Args:
        name: Relation name (e.g., 'fibonacci', 'arithmetic')
        **kwargs: Passed to the relation constructor (e.g., prefix='fib_')

    Returns:
        Relation instance

    Raises:
        KeyError: If no relation is registered under name
    """
    if name in RELATION_REGISTRY:
        return RELATION_REGISTRY[name](**kwargs)
    raise KeyError(
        f"No relation named '{name}'. "
        f"Available: {list(RELATION_REGISTRY.keys())}"
    )


__all__ = [
    "Relation",
    "RelationParameters",
    "RowValues",
    "ZeroRelation",
    "FibonacciRelation",
    "ArithmeticRelation",
    "RELATION_REGISTRY",
    "get_relation",
]
