# algorithm/grammatical_evolution.py
"""
Multi-objective Grammatical Evolution core (NSGA-II generational loop).

Genomes are integer vectors; the problem maps them to phenotypes and objective
values. The engine only ranks, varies and reduces populations.
- Ranking primitives: moge.engine.ranking
- Elitist reduction: reduction.py
- Lifecycle states: state.py
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import Iterable

import numpy as np

from moge.engine.config import EngineConfig
from moge.engine.ranking import CrowdingDistance, SolutionDominance
from moge.foundation.exceptions import ContractViolationError, DegeneratePopulationWarning, EngineStateError
from moge.foundation.problem.base import Problem
from moge.foundation.solution import Population, Solution
from moge.hooks.progress import ProgressEvent, ProgressSink, log_progress
from moge.operators.protocols import CrossoverOperator, MutationOperator, SelectionOperator
from moge.operators.registry import make_crossover, make_mutation, make_selection

from .reduction import reduce_population
from .state import EngineState

_REPORT_STEP = 10


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _require_callable(kind: str, operator: object) -> None:
    if not callable(operator):
        raise TypeError(f"{kind} operator must be callable; got {type(operator).__name__}.")


class GrammaticalEvolution:
    """
    NSGA-II engine over integer genomes.

    Operators default to the ones named in ``config`` and can be injected or
    replaced later through the setters. Progress milestones are sent to the
    ``progress`` sink (logging by default).
    """

    def __init__(
        self,
        problem: Problem,
        config: EngineConfig | None = None,
        *,
        selection: SelectionOperator | None = None,
        crossover: CrossoverOperator | None = None,
        mutation: MutationOperator | None = None,
        dominance: SolutionDominance | None = None,
        progress: ProgressSink | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.problem = problem
        self.cfg = (config or EngineConfig()).resolve(problem)
        self.rng = rng if rng is not None else np.random.default_rng(self.cfg.seed)
        self.dominance = dominance or SolutionDominance.for_problem(problem)
        self.progress: ProgressSink = progress or log_progress

        self.selection_operator: SelectionOperator = selection or make_selection(self.cfg.selection, rng=self.rng)
        self.crossover_operator: CrossoverOperator = crossover or make_crossover(
            self.cfg.crossover, problem, self.cfg.crossover_probability, rng=self.rng
        )
        assert self.cfg.mutation_probability is not None
        self.mutation_operator: MutationOperator = mutation or make_mutation(
            self.cfg.mutation, problem, self.cfg.mutation_probability, rng=self.rng
        )
        for kind, op in (
            ("selection", self.selection_operator),
            ("crossover", self.crossover_operator),
            ("mutation", self.mutation_operator),
        ):
            _require_callable(kind, op)

        self._max_generations = self.cfg.max_generations
        self._population_size = self.cfg.population_size
        self._population: Population | None = None
        self._generation = 0
        self._state = EngineState.UNINITIALIZED

    # ------------------------------------------------------------------ state

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> Population:
        if self._population is None:
            raise EngineStateError("population", self._state)
        return self._population

    @property
    def max_generations(self) -> int:
        return self._max_generations

    @property
    def population_size(self) -> int:
        return self._population_size

    # -------------------------------------------------------------- lifecycle

    def initialize(self, initial_solutions: Iterable[Solution] | None = None) -> None:
        """Create (or adopt) and evaluate the initial population; resets the run."""
        if initial_solutions is None:
            population = self.problem.new_random_solutions(self._population_size, self.rng)
        else:
            population = Population(initial_solutions)
        self.problem.evaluate(population)
        CrowdingDistance(self.problem.number_of_objectives()).execute(population)
        self._population = population
        self._generation = 0
        self._state = EngineState.READY
        _logger().info(
            "Initialized population of %d solutions (target size %d, %d generations)",
            len(population),
            self._population_size,
            self._max_generations,
        )

    def step(self) -> bool:
        """
        Run one generation. Returns False when it was skipped because the
        population holds fewer than two solutions.
        """
        if self._state not in (EngineState.READY, EngineState.RUNNING):
            raise EngineStateError("step", self._state)
        self._state = EngineState.RUNNING
        self._generation += 1
        population = self.population

        if len(population) < 2:
            message = f"Generation: {self._generation}. Population size is less than 2."
            _logger().warning(message)
            warnings.warn(message, DegeneratePopulationWarning, stacklevel=2)
            return False

        child_pop = Population()
        for _ in range(math.ceil(self._population_size / 2)):
            parent1 = self.selection_operator(population)
            parent2 = self.selection_operator(population)
            offspring = self.crossover_operator(parent1, parent2)
            if len(offspring) == 0:
                raise ContractViolationError("Crossover operator returned no offspring.")
            for child in offspring:
                child_pop.append(self.mutation_operator(child))
        self.problem.evaluate(child_pop)

        mixed_pop = Population(population)
        mixed_pop.extend(child_pop)
        self._population = self.reduce(mixed_pop, self._population_size)
        _logger().debug(
            "Generation %d/%d: %d parents + %d offspring -> %d survivors",
            self._generation,
            self._max_generations,
            len(population),
            len(child_pop),
            len(self._population),
        )
        return True

    def execute(self) -> Population:
        """
        Step until the generation limit, then return the non-dominated solutions.

        On a terminated engine no generation is run and the current
        non-dominated solutions are returned again.
        """
        if self._state is EngineState.TERMINATED:
            return self.current_solution()
        if self._state is not EngineState.READY and self._state is not EngineState.RUNNING:
            raise EngineStateError("execute", self._state)
        next_report = _REPORT_STEP
        while self._generation < self._max_generations:
            self.step()
            percentage = (self._generation * 100) // self._max_generations
            if percentage >= next_report:
                milestone = percentage - percentage % _REPORT_STEP
                self.progress(
                    ProgressEvent(
                        generation=self._generation,
                        max_generations=self._max_generations,
                        percentage=milestone,
                        objectives=self.population.objective_matrix(),
                    )
                )
                next_report = milestone + _REPORT_STEP
        self._state = EngineState.TERMINATED
        result = self.current_solution()
        _logger().info("Finished after %d generations with %d non-dominated solutions", self._generation, len(result))
        return result

    def current_solution(self) -> Population:
        """Non-dominated subset of the current population, as a new Population."""
        if self._population is None:
            raise EngineStateError("current_solution", self._state)
        return self._population.reduce_to_non_dominated(self.dominance)

    def reduce(self, population: Population, max_size: int) -> Population:
        return reduce_population(population, max_size, self.dominance, self.problem.number_of_objectives())

    # ---------------------------------------------------------------- setters

    def set_selection_operator(self, operator: SelectionOperator) -> None:
        _require_callable("selection", operator)
        self.selection_operator = operator

    def set_crossover_operator(self, operator: CrossoverOperator) -> None:
        _require_callable("crossover", operator)
        self.crossover_operator = operator

    def set_mutation_operator(self, operator: MutationOperator) -> None:
        _require_callable("mutation", operator)
        self.mutation_operator = operator

    def set_max_generations(self, max_generations: int) -> None:
        if max_generations <= 0:
            raise ValueError("max_generations must be a positive integer.")
        self._max_generations = int(max_generations)

    def set_population_size(self, population_size: int) -> None:
        if population_size <= 0:
            raise ValueError("population_size must be a positive integer.")
        self._population_size = int(population_size)


__all__ = ["GrammaticalEvolution"]
