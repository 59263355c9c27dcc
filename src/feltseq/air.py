"""
Grocery List AIR (Algebraic Intermediate Representation)

A two-column trace that adds item prices into a running total:

    row i:  [item_i, total_i]      total_i = item_0 + ... + item_{i-1}

Constraints:
1. Transition: total[i+1] = item[i] + total[i]
2. Boundary: total[0] = 0, total[last] = result

After the items the trace closes with [0, total] rows up to a power of two,
so padding never breaks the transition constraint.
"""

from dataclasses import dataclass
from typing import List, Sequence
import logging

from .field import FieldElement, Operand, ZERO, elements

logger = logging.getLogger(__name__)


TRACE_WIDTH = 2

ITEM = 0
TOTAL = 1


@dataclass
class ExecutionTrace:
    """Row-major trace; every row has TRACE_WIDTH cells."""
    rows: List[List[FieldElement]]

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def get(self, column: int, row: int) -> FieldElement:
        return self.rows[row][column]

    def column(self, index: int) -> List[FieldElement]:
        return [row[index] for row in self.rows]

    def pad_to_power_of_two(self) -> 'ExecutionTrace':
        """Pad trace to next power of 2 with copies of the last row."""
        target_len = 1
        while target_len < self.num_rows:
            target_len *= 2

        if target_len == self.num_rows:
            return self

        padded = [list(row) for row in self.rows]
        last = padded[-1] if padded else [ZERO] * TRACE_WIDTH
        while len(padded) < target_len:
            padded.append(list(last))
        return ExecutionTrace(padded)


@dataclass
class Assertion:
    """Constraint at a specific trace position."""
    column: int
    row: int
    value: FieldElement


class GroceryAir:
    """
    Constraint system for a grocery total of ``result`` over a trace of
    ``trace_length`` rows.
    """

    transition_degrees = [1]

    def __init__(self, trace_length: int, result: Operand):
        if trace_length < 1:
            raise ValueError(f"Trace length must be positive, got {trace_length}")
        self.trace_length = trace_length
        self.result = result if isinstance(result, FieldElement) else FieldElement(result)

    def evaluate_transition(
        self,
        current: Sequence[FieldElement],
        next_row: Sequence[FieldElement]
    ) -> FieldElement:
        """Zero iff next_row carries the updated total."""
        return next_row[TOTAL] - (current[ITEM] + current[TOTAL])

    def get_assertions(self) -> List[Assertion]:
        last_step = self.trace_length - 1
        return [
            Assertion(column=TOTAL, row=0, value=ZERO),
            Assertion(column=TOTAL, row=last_step, value=self.result),
        ]

    def verify_trace(self, trace: ExecutionTrace) -> bool:
        """
        Verify trace satisfies all constraints.

        This is O(n) verification directly on the trace.
        """
        if trace.num_rows != self.trace_length:
            return False
        if any(len(row) != TRACE_WIDTH for row in trace.rows):
            return False

        for a in self.get_assertions():
            if trace.get(a.column, a.row) != a.value:
                logger.debug("assertion failed at column %d row %d", a.column, a.row)
                return False

        for i in range(trace.num_rows - 1):
            if not self.evaluate_transition(trace.rows[i], trace.rows[i + 1]).is_zero():
                logger.debug("transition constraint violated between rows %d and %d", i, i + 1)
                return False

        return True


def build_trace(item_costs: Sequence[Operand]) -> ExecutionTrace:
    """Trace summing ``item_costs``, padded to a power of two."""
    costs = elements(item_costs)
    if not costs:
        raise ValueError("Grocery list must contain at least one item")

    rows = []
    total = ZERO
    for cost in costs:
        rows.append([cost, total])
        total = total + cost
    rows.append([ZERO, total])

    return ExecutionTrace(rows).pad_to_power_of_two()


def get_pub_inputs(trace: ExecutionTrace) -> FieldElement:
    """Claimed total: the running sum in the last row."""
    return trace.get(TOTAL, trace.num_rows - 1)


def verify(trace: ExecutionTrace, result: Operand) -> bool:
    return GroceryAir(trace.num_rows, result).verify_trace(trace)
