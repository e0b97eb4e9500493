from .reputation import ReputationChecker

__all__ = ["ReputationChecker"]
