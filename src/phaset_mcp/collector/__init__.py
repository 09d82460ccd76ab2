from .collector import BudgetedCollector, collect, estimate_tokens, resolve_profile, truncate_content
from .discovery import discover, validate_root
from .patterns import PatternSet, is_included, match_pattern, normalize_pattern, translate
from .schema import Budgets, CollectedFile, CollectionEvent, CollectionResult

__all__ = [
    "BudgetedCollector", "collect", "discover", "validate_root",
    "estimate_tokens", "resolve_profile", "truncate_content",
    "PatternSet", "is_included", "match_pattern", "normalize_pattern", "translate",
    "Budgets", "CollectedFile", "CollectionEvent", "CollectionResult",
]
