"""Dynamic programming: edit distance, stairs, knapsacks, grid paths, coin change."""

import math


def edit_distance(s, t):
    """Minimum number of insertions, deletions and substitutions turning ``s`` into ``t``."""
    n, m = len(s), len(t)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dp[i][0] = i
    for j in range(1, m + 1):
        dp[0][j] = j
    for i, sc in enumerate(s, 1):
        for j, tc in enumerate(t, 1):
            if sc == tc:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = min(dp[i][j - 1], dp[i - 1][j], dp[i - 1][j - 1]) + 1
    return dp[n][m]


def climbing_stairs_backtrack(n):
    """Count ways to climb ``n`` stairs in steps of 1 or 2 by exhaustive backtracking."""
    choices = (1, 2)
    count = 0

    def climb(state):
        nonlocal count
        if state == n:
            count += 1
        for choice in choices:
            if state + choice > n:
                continue
            climb(state + choice)

    climb(0)
    return count


def _require_positive(n):
    if n < 1:
        raise ValueError("n must be at least 1")


def climbing_stairs_dfs(n):
    """Count ways to climb ``n`` stairs by plain recursive search."""
    _require_positive(n)

    def ways(i):
        if i in (1, 2):
            return i
        return ways(i - 1) + ways(i - 2)

    return ways(n)


def climbing_stairs_dp(n):
    """Count ways to climb ``n`` stairs with a bottom-up table."""
    _require_positive(n)
    if n in (1, 2):
        return n
    dp = [0] * (n + 1)
    dp[1], dp[2] = 1, 2
    for i in range(3, n + 1):
        dp[i] = dp[i - 1] + dp[i - 2]
    return dp[n]


def _check_items(wgt, val):
    if len(wgt) != len(val):
        raise ValueError("weights and values must have the same length")


def knapsack_dfs(wgt, val, cap):
    """Best 0-1 knapsack value by brute-force search."""
    _check_items(wgt, val)

    def best(i, c):
        if i == 0 or c == 0:
            return 0
        if wgt[i - 1] > c:
            return best(i - 1, c)
        no = best(i - 1, c)
        yes = best(i - 1, c - wgt[i - 1]) + val[i - 1]
        return max(no, yes)

    return best(len(wgt), cap)


def knapsack_memo(wgt, val, cap):
    """Best 0-1 knapsack value by memoised search."""
    _check_items(wgt, val)
    mem = [[None] * (cap + 1) for _ in range(len(wgt) + 1)]

    def best(i, c):
        if i == 0 or c == 0:
            return 0
        if mem[i][c] is not None:
            return mem[i][c]
        if wgt[i - 1] > c:
            return best(i - 1, c)
        no = best(i - 1, c)
        yes = best(i - 1, c - wgt[i - 1]) + val[i - 1]
        mem[i][c] = max(no, yes)
        return mem[i][c]

    return best(len(wgt), cap)


def knapsack_dp(wgt, val, cap):
    """Best 0-1 knapsack value with a bottom-up table."""
    _check_items(wgt, val)
    n = len(wgt)
    dp = [[0] * (cap + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        w, v = wgt[i - 1], val[i - 1]
        for c in range(1, cap + 1):
            if w > c:
                dp[i][c] = dp[i - 1][c]
            else:
                dp[i][c] = max(dp[i - 1][c], dp[i - 1][c - w] + v)
    return dp[n][cap]


def unbounded_knapsack_dp(wgt, val, cap):
    """Best knapsack value when each item may be taken any number of times."""
    _check_items(wgt, val)
    dp = [0] * (cap + 1)
    for w, v in zip(wgt, val):
        for c in range(w, cap + 1):
            if c >= 1:
                dp[c] = max(dp[c], dp[c - w] + v)
    return dp[cap]


def _check_grid(grid):
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")


def min_path_sum_dfs(grid):
    """Cheapest top-left to bottom-right path moving right or down, by brute force."""
    _check_grid(grid)

    def cost(i, j):
        if i == 0 and j == 0:
            return grid[0][0]
        if i < 0 or j < 0:
            return math.inf
        return min(cost(i - 1, j), cost(i, j - 1)) + grid[i][j]

    return cost(len(grid) - 1, len(grid[0]) - 1)


def min_path_sum_memo(grid):
    """Cheapest top-left to bottom-right path, by memoised search."""
    _check_grid(grid)
    mem = [[None] * len(row) for row in grid]

    def cost(i, j):
        if i == 0 and j == 0:
            return grid[0][0]
        if i < 0 or j < 0:
            return math.inf
        if mem[i][j] is not None:
            return mem[i][j]
        mem[i][j] = min(cost(i - 1, j), cost(i, j - 1)) + grid[i][j]
        return mem[i][j]

    return cost(len(grid) - 1, len(grid[0]) - 1)


def min_path_sum_dp(grid):
    """Cheapest top-left to bottom-right path, with a bottom-up table."""
    _check_grid(grid)
    n, m = len(grid), len(grid[0])
    dp = [[0] * m for _ in range(n)]
    dp[0][0] = grid[0][0]
    for j in range(1, m):
        dp[0][j] = dp[0][j - 1] + grid[0][j]
    for i in range(1, n):
        dp[i][0] = dp[i - 1][0] + grid[i][0]
    for i in range(1, n):
        for j in range(1, m):
            dp[i][j] = min(dp[i][j - 1], dp[i - 1][j]) + grid[i][j]
    return dp[n - 1][m - 1]


def coin_change_dp(coins, amt):
    """Fewest coins summing to ``amt`` (unlimited supply), or -1 if impossible."""
    n = len(coins)
    unreachable = amt + 1
    dp = [[0] * (amt + 1) for _ in range(n + 1)]
    for a in range(1, amt + 1):
        dp[0][a] = unreachable
    for i in range(1, n + 1):
        coin = coins[i - 1]
        for a in range(1, amt + 1):
            if coin > a:
                dp[i][a] = dp[i - 1][a]
            else:
                dp[i][a] = min(dp[i - 1][a], dp[i][a - coin] + 1)
    return dp[n][amt] if dp[n][amt] != unreachable else -1


def coin_change_dp_compact(coins, amt):
    """Fewest coins summing to ``amt`` using a single-row table, or -1."""
    unreachable = amt + 1
    dp = [0] + [unreachable] * amt
    for coin in coins:
        for a in range(1, amt + 1):
            if coin <= a:
                dp[a] = min(dp[a], dp[a - coin] + 1)
    return dp[amt] if dp[amt] != unreachable else -1


def coin_change_ii_dp(coins, amt):
    """Number of coin combinations summing to ``amt`` (unlimited supply)."""
    n = len(coins)
    dp = [[0] * (amt + 1) for _ in range(n + 1)]
    for row in dp:
        row[0] = 1
    for i in range(1, n + 1):
        coin = coins[i - 1]
        for a in range(1, amt + 1):
            if coin > a:
                dp[i][a] = dp[i - 1][a]
            else:
                dp[i][a] = dp[i - 1][a] + dp[i][a - coin]
    return dp[n][amt]


def coin_change_ii_dp_compact(coins, amt):
    """Number of coin combinations summing to ``amt`` using a single-row table."""
    dp = [1] + [0] * amt
    for coin in coins:
        for a in range(1, amt + 1):
            if coin <= a:
                dp[a] += dp[a - coin]
    return dp[amt]