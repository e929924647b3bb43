"""
Finite-domain constraint problems and a backtracking search over them.

A ConstraintProblem is:
  - variables, each with an ordered finite domain
  - constraints: (scope, predicate) pairs, where predicate(*values) is
    called with the scope's values in scope order
  - all-different groups (kept apart from ordinary constraints because they
    can be checked on partial assignments and pruned cheaply)

BacktrackingSearch enumerates complete assignments that satisfy everything:
  - a constraint is only evaluated once its whole scope is assigned
  - MRV picks the variable with the fewest remaining values next
  - forward checking shrinks future domains after each assignment:
      * all-different peers lose the assigned value
      * a constraint with exactly one unassigned variable keeps only the
        values that satisfy it
    and an emptied domain cuts the branch immediately.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from wordkit.errors import ProblemError

log = logging.getLogger(__name__)

Assignment = Dict[Hashable, Any]


@dataclass(frozen=True)
class Constraint:
    scope: Tuple[Hashable, ...]
    predicate: Callable[..., bool]
    name: str = ""

    def holds(self, assignment: Assignment) -> bool:
        return bool(self.predicate(*(assignment[v] for v in self.scope)))


class ConstraintProblem:
    def __init__(self):
        self._domains: Dict[Hashable, List[Any]] = {}
        self.constraints: List[Constraint] = []
        self.all_different: List[Tuple[Hashable, ...]] = []

    # ---- building ----

    def add_variable(self, name: Hashable, domain: Iterable[Any]) -> None:
        if name in self._domains:
            raise ProblemError(f"duplicate variable {name!r}")
        values = list(domain)
        if not values:
            raise ProblemError(f"variable {name!r} has an empty domain")
        self._domains[name] = values

    def _check_scope(self, scope: Iterable[Hashable]) -> Tuple[Hashable, ...]:
        scope = tuple(scope)
        if not scope:
            raise ProblemError("constraint scope is empty")
        for v in scope:
            if v not in self._domains:
                raise ProblemError(f"unknown variable {v!r} in constraint scope")
        return scope

    def add_constraint(self, scope: Iterable[Hashable], predicate: Callable[..., bool],
                       name: Optional[str] = None) -> Constraint:
        scope = self._check_scope(scope)
        c = Constraint(scope, predicate, name or getattr(predicate, "__name__", "constraint"))
        self.constraints.append(c)
        return c

    def add_all_different(self, scope: Iterable[Hashable]) -> None:
        self.all_different.append(self._check_scope(scope))

    # ---- queries ----

    @property
    def variables(self) -> List[Hashable]:
        return list(self._domains)

    def domain(self, name: Hashable) -> List[Any]:
        return list(self._domains[name])

    def domains(self) -> Dict[Hashable, List[Any]]:
        return {k: list(v) for k, v in self._domains.items()}

    def is_consistent(self, assignment: Assignment) -> bool:
        """
        Check everything decidable from a (possibly partial) assignment.
        Constraints with unassigned scope variables are skipped.
        """
        for group in self.all_different:
            vals = [assignment[v] for v in group if v in assignment]
            if len(vals) != len(set(vals)):
                return False
        for c in self.constraints:
            if all(v in assignment for v in c.scope) and not c.holds(assignment):
                return False
        return True

    def is_solution(self, assignment: Assignment) -> bool:
        return all(v in assignment for v in self._domains) and self.is_consistent(assignment)


class BacktrackingSearch:
    """Depth-first search with MRV and forward checking (both switchable)."""

    def __init__(self, problem: ConstraintProblem, *, mrv: bool = True, forward_check: bool = True,
                 rng: Optional[random.Random] = None):
        self.problem = problem
        self.mrv = mrv
        self.forward_check = forward_check
        # When set, value order inside each domain is shuffled once up front.
        self.rng = rng
        self.stats: Dict[str, int] = {"nodes": 0, "backtracks": 0, "prunes": 0, "solutions": 0}

        self._order = problem.variables
        self._constraints_of: Dict[Hashable, List[Constraint]] = {v: [] for v in self._order}
        for c in problem.constraints:
            for v in set(c.scope):
                self._constraints_of[v].append(c)
        self._peers: Dict[Hashable, set] = {v: set() for v in self._order}
        for group in problem.all_different:
            for v in group:
                self._peers[v].update(u for u in group if u != v)

    def solve(self) -> Optional[Assignment]:
        for sol in self.solutions(limit=1):
            return sol
        return None

    def solutions(self, limit: Optional[int] = None) -> Iterator[Assignment]:
        """Yield complete consistent assignments, at most `limit` of them."""
        if limit is not None and limit <= 0:
            return
        domains = self.problem.domains()
        if self.rng is not None:
            for vals in domains.values():
                self.rng.shuffle(vals)

        found = 0
        for sol in self._search({}, domains):
            found += 1
            self.stats["solutions"] = found
            yield sol
            if limit is not None and found >= limit:
                break
        log.debug("search stats: %s", self.stats)

    # ---- internals ----

    def _select(self, assignment: Assignment, domains: Dict[Hashable, List[Any]]) -> Hashable:
        unassigned = [v for v in self._order if v not in assignment]
        if not self.mrv:
            return unassigned[0]
        return min(unassigned, key=lambda v: len(domains[v]))

    def _locally_consistent(self, var: Hashable, value: Any, assignment: Assignment) -> bool:
        for peer in self._peers[var]:
            if peer in assignment and assignment[peer] == value:
                return False
        for c in self._constraints_of[var]:
            if all(v in assignment for v in c.scope) and not c.holds(assignment):
                return False
        return True

    def _prune(self, var: Hashable, value: Any, assignment: Assignment,
               domains: Dict[Hashable, List[Any]]) -> Optional[Dict[Hashable, List[Any]]]:
        """Return reduced copies of the future domains, or None on a wipeout."""
        new = dict(domains)
        new[var] = [value]

        for peer in self._peers[var]:
            if peer not in assignment and value in new[peer]:
                new[peer] = [x for x in new[peer] if x != value]
                self.stats["prunes"] += 1
                if not new[peer]:
                    return None

        for c in self._constraints_of[var]:
            open_vars = {v for v in c.scope if v not in assignment}
            if len(open_vars) != 1:
                continue
            (u,) = open_vars
            kept = []
            for x in new[u]:
                assignment[u] = x
                if c.holds(assignment):
                    kept.append(x)
            assignment.pop(u, None)
            if len(kept) != len(new[u]):
                self.stats["prunes"] += len(new[u]) - len(kept)
                new[u] = kept
                if not kept:
                    return None
        return new

    def _search(self, assignment: Assignment,
                domains: Dict[Hashable, List[Any]]) -> Iterator[Assignment]:
        if len(assignment) == len(self._order):
            yield dict(assignment)
            return

        var = self._select(assignment, domains)
        for value in domains[var]:
            self.stats["nodes"] += 1
            assignment[var] = value
            if not self._locally_consistent(var, value, assignment):
                self.stats["backtracks"] += 1
                del assignment[var]
                continue
            if self.forward_check:
                reduced = self._prune(var, value, assignment, domains)
                if reduced is None:
                    self.stats["backtracks"] += 1
                    del assignment[var]
                    continue
            else:
                reduced = domains
            yield from self._search(assignment, reduced)
            del assignment[var]
