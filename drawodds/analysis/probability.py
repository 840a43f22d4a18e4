"""
Draw probability primitives.

Hypergeometric odds of drawing target cards without replacement,
built on exact integer combinatorics.
"""


def factorial(n: int) -> int:
    """
    Return n! for n >= 0.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Factorial is undefined for negative numbers, got {n}")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def combination(n: int, k: int) -> int:
    """
    Number of ways to choose k items from n ("n choose k").

    Returns 0 when k is out of range. Integer arithmetic is exact, so
    large n cannot overflow.
    """
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1
    return factorial(n) // (factorial(k) * factorial(n - k))


def hypergeometric(
    population: int,
    successes: int,
    sample_size: int,
    min_successes: int,
) -> float:
    """
    Probability of drawing at least a minimum number of target cards.

    Draws sample_size cards without replacement from a deck of population
    cards that holds successes copies of the target, and sums
    P(X = i) for i from min_successes up to min(successes, sample_size):

        P(X = i) = C(successes, i) * C(population - successes, sample_size - i)
                   / C(population, sample_size)

    Args:
        population: Total cards in the deck
        successes: Copies of the target card in the deck
        sample_size: Cards drawn
        min_successes: Minimum copies wanted

    Returns:
        Probability between 0.0 and 1.0. Impossible draws return 0.0.

    Example:
        >>> # One copy in a 20-card deck, drawing 7
        >>> hypergeometric(20, 1, 7, 1)
        0.35
    """
    if sample_size > population:
        return 0.0
    if successes > population:
        return 0.0
    if min_successes > successes:
        return 0.0
    if min_successes > sample_size:
        return 0.0

    # Guarded above: sample_size <= population, so the denominator is >= 1
    denominator = combination(population, sample_size)

    probability = 0.0
    for i in range(min_successes, min(successes, sample_size) + 1):
        numerator = combination(successes, i) * combination(population - successes, sample_size - i)
        probability += numerator / denominator

    return probability
