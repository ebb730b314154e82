"""
Application common module.

Contains shared building blocks for the application layer:
- Result: Ok / Err outcome of a use case
- use_case_operation: boundary decorator applied to every use case
"""

from .decorators import use_case_operation
from .result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result", "use_case_operation"]
