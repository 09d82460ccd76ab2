from .collector import (
    Budgets,
    BudgetedCollector,
    CollectedFile,
    CollectionEvent,
    CollectionResult,
    PatternSet,
    collect,
    discover,
    match_pattern,
)

__version__ = "0.1.0"

__all__ = [
    "BudgetedCollector",
    "collect", "discover", "match_pattern", "PatternSet",
    "Budgets", "CollectedFile", "CollectionEvent", "CollectionResult",
]
