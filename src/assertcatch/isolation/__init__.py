from .models import IsolatedResult, IsolationError
from .runner import run_isolated

__all__ = ["IsolatedResult", "IsolationError", "run_isolated"]
