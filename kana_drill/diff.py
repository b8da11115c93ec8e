"""
Syllable diff for kana-drill.

Computes the cheapest sequence of edit operations turning an input
string (what the learner typed) into a list of source syllables (the
expected answer, from split_romaji).

Operations and costs:

    Same(txt)          0
    Delete(txt)        1 + len(txt)
    Insert(txt)        1 + len(txt)
    Change(txt, src)   1 + len(txt) + len(src)

Insert and Change always cover exactly one whole source syllable, so a
syllable is never partially matched. Delete is the only operation not
bound to a syllable: it removes any run of input with no counterpart in
the source.

Example:

    Source:  A1 B2 C3 D4 E5 F6 G7 H8
    Input:   A1xxB2yyD4F6G7zzH8

    Same(A1) Delete(xx) Same(B2) Change(yy, C3) Same(D4)
    Insert(E5) Same(F6) Same(G7) Delete(zz) Same(H8)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple

logger = logging.getLogger(__name__)


# ============================================================================
# Diff Operations
# ============================================================================

class DiffOp(Enum):
    """Kind of a diff operation."""
    SAME = "same"
    DELETE = "delete"
    INSERT = "insert"
    CHANGE = "change"


@dataclass(frozen=True, slots=True)
class Diff:
    """
    One operation in a diff between a source and an input.

    Attributes:
        op: The operation
        text: Syllable for SAME and INSERT, input text for DELETE and CHANGE
        source: Source syllable replacing `text` (CHANGE only)
    """
    op: DiffOp
    text: str
    source: str = ""

    @classmethod
    def same(cls, text: str) -> "Diff":
        return cls(DiffOp.SAME, text)

    @classmethod
    def delete(cls, text: str) -> "Diff":
        return cls(DiffOp.DELETE, text)

    @classmethod
    def insert(cls, text: str) -> "Diff":
        return cls(DiffOp.INSERT, text)

    @classmethod
    def change(cls, text: str, source: str) -> "Diff":
        return cls(DiffOp.CHANGE, text, source)

    @property
    def cost(self) -> int:
        """Cost of this operation."""
        if self.op is DiffOp.SAME:
            return 0
        return 1 + len(self.text) + len(self.source)

    def to_dict(self) -> Dict[str, str]:
        data = {"op": self.op.value, "text": self.text}
        if self.op is DiffOp.CHANGE:
            data["source"] = self.source
        return data

    def __repr__(self) -> str:
        if self.op is DiffOp.CHANGE:
            return f"Change({self.text!r}, {self.source!r})"
        return f"{self.op.name.capitalize()}({self.text!r})"


def diff_cost(ops: Sequence[Diff]) -> int:
    """Total cost of a sequence of diff operations."""
    return sum(op.cost for op in ops)


# ============================================================================
# Diff Algorithm
# ============================================================================

# Step kinds stored in the choice table. The second element of a choice
# is the number of input characters consumed by DELETE and CHANGE.
_END = 0
_SAME = 1
_INSERT = 2
_DELETE = 3
_CHANGE = 4


def diff(source: Sequence[str], text: str) -> List[Diff]:
    """
    Diff the syllables in `source` against `text`.

    SAME, INSERT and CHANGE correspond one to one, in order, to the
    syllables in `source`. DELETE is extra input text with no
    counterpart in the source.

    When the remaining input starts with the current syllable the
    syllable is always taken as SAME. Otherwise the cheapest of INSERT,
    DELETE and CHANGE is taken; on equal cost CHANGE wins over DELETE
    and DELETE over INSERT, and the shortest DELETE or CHANGE wins over
    longer ones.

    Args:
        source: Expected syllables
        text: Text to compare, already normalized by the caller

    Returns:
        List of Diff operations transforming `text` into `source`
    """
    source = list(source)
    n = len(source)
    m = len(text)

    # remaining[a] = characters + count of the syllables from a on
    remaining = [0] * (n + 1)
    for a in range(n - 1, -1, -1):
        remaining[a] = remaining[a + 1] + len(source[a]) + 1

    # cost[a][b] is the cheapest diff of source[a:] against text[b:]
    cost = [[0] * (m + 1) for _ in range(n + 1)]
    choice: List[List[Tuple[int, int]]] = [[(_END, 0)] * (m + 1) for _ in range(n + 1)]

    for a in range(n, -1, -1):
        cost_a = cost[a]
        choice_a = choice[a]
        cost_next = cost[a + 1] if a < n else None

        for b in range(m, -1, -1):
            if a == n and b == m:
                cost_a[b] = 0
                choice_a[b] = (_END, 0)
                continue

            if a == n:
                # End of source: delete the rest of the input at once
                cost_a[b] = m - b + 1
                choice_a[b] = (_DELETE, m - b)
                continue

            if b == m:
                # End of input: insert each remaining syllable
                cost_a[b] = remaining[a]
                choice_a[b] = (_INSERT, 0)
                continue

            syllable = source[a]
            syllable_len = len(syllable)

            if text.startswith(syllable, b):
                cost_a[b] = cost_next[b + syllable_len]
                choice_a[b] = (_SAME, 0)
                continue

            ins = cost_next[b] + syllable_len + 1

            del_k, del_cost = 1, cost_a[b + 1] + 1
            rep_k, rep_cost = 1, cost_next[b + 1] + 1 + syllable_len
            for k in range(2, m - b + 1):
                new_cost = cost_a[b + k] + k
                if new_cost < del_cost:
                    del_k, del_cost = k, new_cost
                new_cost = cost_next[b + k] + k + syllable_len
                if new_cost < rep_cost:
                    rep_k, rep_cost = k, new_cost
            del_cost += 1
            rep_cost += 1

            # Precedence on equal cost: CHANGE > DELETE > INSERT
            if ins < del_cost and ins < rep_cost:
                cost_a[b] = ins
                choice_a[b] = (_INSERT, 0)
            elif del_cost < rep_cost:
                cost_a[b] = del_cost
                choice_a[b] = (_DELETE, del_k)
            else:
                cost_a[b] = rep_cost
                choice_a[b] = (_CHANGE, rep_k)

    logger.debug(f"diff: {n} syllables against {m} chars, cost {cost[0][0]}")

    out: List[Diff] = []
    a = 0
    b = 0
    while True:
        step, k = choice[a][b]
        if step == _END:
            break
        if step == _SAME:
            out.append(Diff.same(source[a]))
            b += len(source[a])
            a += 1
        elif step == _INSERT:
            out.append(Diff.insert(source[a]))
            a += 1
        elif step == _DELETE:
            out.append(Diff.delete(text[b:b + k]))
            b += k
        else:
            out.append(Diff.change(text[b:b + k], source[a]))
            a += 1
            b += k

    return out
