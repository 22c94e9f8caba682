from __future__ import annotations

import argparse
import sys
import time
from typing import Any, Dict, Sequence

from moge.engine.algorithm import GrammaticalEvolution
from moge.engine.config import EngineConfig, load_run_spec
from moge.foundation.exceptions import MissingConfigError, MOGEError
from moge.foundation.logging import configure_moge_logging
from moge.foundation.problem import available_problem_names, get_problem_specs, make_problem
from moge.io_utils import write_metadata, write_population

DEFAULT_PROBLEM = "resource_allocation"
_SPEC_PROBLEM_KEYS = {"problem", "n_var"}


def _parse_probability_arg(parser, flag: str, raw, *, allow_expression: bool):
    if raw is None:
        return None
    text = str(raw).strip()
    if allow_expression and text.endswith("/n"):
        numerator = text[:-2].strip() or "1"
        try:
            float(numerator)
        except ValueError:
            parser.error(f"{flag} numerator must be numeric; got '{numerator}'.")
        return f"{numerator}/n"
    try:
        value = float(text)
    except ValueError:
        parser.error(f"{flag} must be a float in [0, 1]" + (" or an expression like '1/n'." if allow_expression else "."))
    if not 0.0 <= value <= 1.0:
        parser.error(f"{flag} must be within [0, 1].")
    return value


def _resolve_probability_expression(value, n_var: int):
    if isinstance(value, str) and value.endswith("/n"):
        return min(1.0, float(value[:-2]) / n_var)
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moge",
        description="Multi-objective Grammatical Evolution (NSGA-II over integer genomes).",
    )
    parser.add_argument("--config", help="JSON or YAML run spec; command-line flags override its values.")
    parser.add_argument("--problem", choices=available_problem_names(), help=f"Problem to solve (default: {DEFAULT_PROBLEM}).")
    parser.add_argument("--n-var", type=int, help="Override the genome length of the selected problem.")
    parser.add_argument("--population-size", type=int, help="Target population size.")
    parser.add_argument("--max-generations", type=int, help="Number of generations to run.")
    parser.add_argument("--mutation-prob", help="Per-gene mutation probability in [0, 1] or 'k/n' (default: 1/n).")
    parser.add_argument("--crossover-prob", help="Crossover probability in [0, 1] (default: 0.9).")
    parser.add_argument("--selection", help="Selection operator (binary_tournament, random).")
    parser.add_argument("--crossover", help="Crossover operator (single_point).")
    parser.add_argument("--mutation", help="Mutation operator (int_flip, creep).")
    parser.add_argument("--seed", type=int, help="Random seed.")
    parser.add_argument("--output", help="Directory for FUN.csv, VAR.csv and metadata.json.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v info, -vv debug).")
    parser.add_argument("--list-problems", action="store_true", help="List registered problems and exit.")
    return parser


def _split_spec(spec: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    problem_part = {k: v for k, v in spec.items() if k in _SPEC_PROBLEM_KEYS}
    engine_part = {k: v for k, v in spec.items() if k not in _SPEC_PROBLEM_KEYS}
    return problem_part, engine_part


def _print_problems() -> None:
    for key, spec in get_problem_specs().items():
        print(f"{key:24s} {spec.label} (n_var={spec.default_n_var}) - {spec.description}")


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    spec = load_run_spec(args.config) if args.config else {}
    problem_spec, engine_spec = _split_spec(spec)

    if args.problem is None and "problem" in problem_spec and not problem_spec["problem"]:
        raise MissingConfigError("problem")
    problem_name = args.problem or problem_spec.get("problem") or DEFAULT_PROBLEM
    n_var = args.n_var if args.n_var is not None else problem_spec.get("n_var")
    problem = make_problem(problem_name, n_var=n_var)

    # spec values may also use the 'k/n' form, so they are resolved here rather than in EngineConfig
    spec_mutation_prob = engine_spec.pop("mutation_probability", engine_spec.pop("mutation_prob", None))
    mutation_prob = _parse_probability_arg(parser, "--mutation-prob", args.mutation_prob, allow_expression=True)
    if mutation_prob is None:
        mutation_prob = spec_mutation_prob
    crossover_prob = _parse_probability_arg(parser, "--crossover-prob", args.crossover_prob, allow_expression=False)

    config = EngineConfig.from_dict(engine_spec).merged(
        population_size=args.population_size,
        max_generations=args.max_generations,
        mutation_probability=_resolve_probability_expression(mutation_prob, problem.number_of_variables()),
        crossover_probability=crossover_prob,
        selection=args.selection,
        crossover=args.crossover,
        mutation=args.mutation,
        seed=args.seed,
    )

    engine = GrammaticalEvolution(problem, config)
    start = time.perf_counter()
    engine.initialize()
    front = engine.execute()
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    print(f"{problem_name}: {len(front)} non-dominated solutions after {engine.generation} generations ({elapsed_ms:.1f} ms)")
    for solution in front:
        print(";".join(f"{value:.6g}" for value in solution.objectives))

    if args.output:
        artifacts = write_population(args.output, front)
        metadata = {
            "problem": problem.describe(),
            "generations": engine.generation,
            "front_size": len(front),
            "time_ms": elapsed_ms,
            "artifacts": artifacts,
        }
        write_metadata(args.output, metadata, engine.cfg.to_dict())
        print(f"Results written to {args.output}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.list_problems:
        _print_problems()
        return 0
    configure_moge_logging(verbose=args.verbose)
    try:
        return run(args, parser)
    except (MOGEError, FileNotFoundError) as exc:
        parser.exit(2, f"moge: error: {exc}\n")
    return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
