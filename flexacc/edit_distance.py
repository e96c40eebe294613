from .models import CostFunction


def edit_distance(
    reference: str,
    candidate: str,
    cost_function: CostFunction = CostFunction.INS1_DEL1_SUBST1,
) -> int:
    """Weighted Levenshtein distance turning ``candidate`` into ``reference``.

    Deleting a candidate character costs ``cost_function.deletion``,
    inserting a reference character costs ``cost_function.insertion``.
    """
    if reference == candidate:
        return 0
    ins = cost_function.insertion
    dele = cost_function.deletion
    sub = cost_function.substitution
    if not candidate:
        return len(reference) * ins
    if not reference:
        return len(candidate) * dele

    # dp[j]: cost of turning candidate[:i] into reference[:j]
    dp = [j * ins for j in range(len(reference) + 1)]
    for i in range(1, len(candidate) + 1):
        prev = dp[0]
        dp[0] = i * dele
        c = candidate[i - 1]
        for j in range(1, len(reference) + 1):
            cur = dp[j]
            cost = 0 if c == reference[j - 1] else sub
            dp[j] = min(cur + dele, dp[j - 1] + ins, prev + cost)
            prev = cur
    return dp[-1]
