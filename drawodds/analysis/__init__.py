from drawodds.analysis.calculator import calculate
from drawodds.analysis.probability import combination, factorial, hypergeometric

__all__ = [
    "calculate",
    "combination",
    "factorial",
    "hypergeometric",
]
