"""Greedy algorithms."""


def coin_change_greedy(coins, amt):
    """Count coins picked greedily (largest first) to make ``amt``.

    ``coins`` must be sorted ascending. Returns -1 when the greedy choice
    cannot reach the amount exactly; the result is not always optimal.
    """
    if not coins:
        raise ValueError("coins must not be empty")
    i = len(coins) - 1
    count = 0
    while amt > 0:
        while i > 0 and coins[i] > amt:
            i -= 1
        amt -= coins[i]
        count += 1
    if amt != 0:
        return -1
    return count