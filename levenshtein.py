import logging


from dataclasses import dataclass
from enum import Enum
from typing import Any, List, NamedTuple, Optional, Sequence


COST_LIMIT = 2 ** 64 - 1


class Op(Enum):
    SKP = 'skip'
    DEL = 'delete'
    INS = 'insert'
    REP = 'replace'


class CostOverflowError(ArithmeticError):
    """Raised when a cumulative cost leaves the representable range."""


@dataclass(frozen=True)
class Costs:
    """Cost of each operation kind. All costs are non-negative integers."""

    skip: int
    delete: int
    insert: int
    replace: int

    def __post_init__(self) -> None:
        for op in Op:
            value = getattr(self, op.value)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f'{op.value} cost must be an integer, got {value!r}')
            if value < 0:
                raise ValueError(f'{op.value} cost must be non-negative, got {value}')

    def __getitem__(self, op: Op) -> int:
        return getattr(self, op.value)


STANDARD_COSTS = Costs(skip=1, delete=10, insert=10, replace=2)
UNIT_COSTS = Costs(skip=0, delete=1, insert=1, replace=1)


@dataclass(frozen=True)
class Edit:
    """One step of an edit script.

    source is None for insertions, target is None for deletions. Skips and
    replacements carry both symbols.
    """

    op: Op
    source: Any
    target: Any
    cost: int


class Cell(NamedTuple):
    cost: int
    edit: Optional[Edit]


Matrix = List[List[Cell]]
Script = List[Edit]
String = Sequence[Any]


def _checked(cost: int, limit: int) -> int:
    if cost > limit:
        raise CostOverflowError(f'cumulative cost {cost} exceeds limit {limit}')
    return cost


def matrix(source: String, target: String, costs: Costs, limit: int=COST_LIMIT) -> Matrix:
    """Builds the table of best costs for every pair of prefixes.

    Row i covers the first i target symbols, column j the first j source
    symbols. Each cell holds the edit that reaches it at minimum cost.
    """
    height = len(target) + 1
    width = len(source) + 1
    logging.debug('Building %dx%d cost matrix', height, width)
    result: Matrix = [[Cell(0, None)] * width for i in range(height)]
    # Row 0 deletes every source symbol.
    for j in range(1, width):
        cost = _checked(result[0][j - 1].cost + costs.delete, limit)
        result[0][j] = Cell(cost, Edit(Op.DEL, source[j - 1], None, costs.delete))
    for i in range(1, height):
        t = target[i - 1]
        # Column 0 inserts every target symbol.
        cost = _checked(result[i - 1][0].cost + costs.insert, limit)
        result[i][0] = Cell(cost, Edit(Op.INS, None, t, costs.insert))
        above = result[i - 1]
        row = result[i]
        for j in range(1, width):
            s = source[j - 1]
            op = Op.SKP if s == t else Op.REP
            # Ties go to the first candidate: diagonal, then delete, then insert.
            best = Cell(above[j - 1].cost + costs[op], Edit(op, s, t, costs[op]))
            del_cost = row[j - 1].cost + costs.delete
            if del_cost < best.cost:
                best = Cell(del_cost, Edit(Op.DEL, s, None, costs.delete))
            ins_cost = above[j].cost + costs.insert
            if ins_cost < best.cost:
                best = Cell(ins_cost, Edit(Op.INS, None, t, costs.insert))
            _checked(best.cost, limit)
            row[j] = best
    return result


def distance(matrix: Matrix) -> int:
    return matrix[-1][-1].cost


def script(matrix: Matrix) -> Script:
    """Replays the optimal path from the final cell back to the origin."""
    script: Script = []
    i = len(matrix) - 1
    j = len(matrix[0]) - 1
    while i > 0 or j > 0:
        edit = matrix[i][j].edit
        assert edit is not None
        logging.debug('(%d, %d): %s', i, j, edit.op.name)
        script.append(edit)
        if edit.op != Op.INS:
            j -= 1
        if edit.op != Op.DEL:
            i -= 1
    script.reverse()
    return script


def plan(source: String, target: String, costs: Costs=STANDARD_COSTS, limit: int=COST_LIMIT) -> Script:
    """Returns a minimum-cost edit script turning source into target."""
    return script(matrix(source, target, costs, limit))


def script_cost(script: Script) -> int:
    return sum(edit.cost for edit in script)


def apply(script: Script, source: String) -> List[Any]:
    """Applies script to source and returns the resulting symbols."""
    result: List[Any] = []
    i = 0
    for edit in script:
        if edit.op != Op.INS:
            if i >= len(source):
                raise ValueError(f'{edit.op.name} past the end of the source')
            if source[i] != edit.source:
                raise ValueError(f'{edit.op.name} expects {edit.source!r} at position {i}, found {source[i]!r}')
            i += 1
        if edit.op != Op.DEL:
            result.append(edit.target)
    if i != len(source):
        raise ValueError(f'script leaves {len(source) - i} source symbols unconsumed')
    return result
