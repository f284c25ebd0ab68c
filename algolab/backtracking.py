"""Backtracking searches: n-queens, permutations and subset sums."""


def n_queens(n):
    """All placements of ``n`` queens; each board is rows of ``"Q"``/``"#"``."""
    if n < 1:
        raise ValueError("n must be positive")
    state = [["#"] * n for _ in range(n)]
    cols = [False] * n
    diags1 = [False] * (2 * n - 1)
    diags2 = [False] * (2 * n - 1)
    res = []

    def place(row):
        if row == n:
            res.append([list(r) for r in state])
            return
        for col in range(n):
            d1 = row - col + n - 1
            d2 = row + col
            if cols[col] or diags1[d1] or diags2[d2]:
                continue
            state[row][col] = "Q"
            cols[col] = diags1[d1] = diags2[d2] = True
            place(row + 1)
            state[row][col] = "#"
            cols[col] = diags1[d1] = diags2[d2] = False

    place(0)
    return res


def _permutations(nums, skip_equal):
    res = []
    state = []
    selected = [False] * len(nums)

    def choose():
        if len(state) == len(nums):
            res.append(list(state))
        tried = set()
        for i, choice in enumerate(nums):
            if selected[i] or (skip_equal and choice in tried):
                continue
            tried.add(choice)
            selected[i] = True
            state.append(choice)
            choose()
            selected[i] = False
            state.pop()

    choose()
    return res


def permutations_i(nums):
    """All permutations of ``nums``, treating every position as distinct."""
    return _permutations(nums, skip_equal=False)


def permutations_ii(nums):
    """All distinct permutations of ``nums``, which may hold equal values."""
    return _permutations(nums, skip_equal=True)


def subset_sum_i(nums, target):
    """Multisets of ``nums`` (reuse allowed) summing to ``target``, each ascending."""
    choices = sorted(nums)
    res = []
    state = []

    def search(start, remaining):
        if remaining == 0:
            res.append(list(state))
            return
        for i in range(start, len(choices)):
            if remaining - choices[i] < 0:
                break
            state.append(choices[i])
            search(i, remaining - choices[i])
            state.pop()

    search(0, target)
    return res


def subset_sum_ii(nums, target):
    """Distinct subsets of ``nums`` (each item used once) summing to ``target``."""
    choices = sorted(nums)
    res = []
    state = []

    def search(start, remaining):
        if remaining == 0:
            res.append(list(state))
            return
        for i in range(start, len(choices)):
            if remaining - choices[i] < 0:
                break
            if i > start and choices[i] == choices[i - 1]:
                continue
            state.append(choices[i])
            search(i + 1, remaining - choices[i])
            state.pop()

    search(0, target)
    return res