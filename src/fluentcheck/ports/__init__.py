from .validation import IParameterSource, IValidator

__all__ = [
    "IParameterSource",
    "IValidator",
]
