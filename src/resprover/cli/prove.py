#!/usr/bin/env python3
"""
Prove DIMACS CNF problems by resolution.

USAGE:
    resprover problem.cnf
    resprover a.cnf b.cnf --selector shortest --steps 500
    resprover problem.cnf --repeat 5000 --lambda 1.0 --lambda-step 0.0001
    resprover --preset qlearn < problem_list.txt
    resprover problem.cnf --weights .weights/value.npz --save-weights .weights/value.npz
    resprover --list
"""

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from dotenv import load_dotenv
from tqdm import tqdm

from resprover.core.logic import Problem
from resprover.data import ProblemSet
from resprover.loops import GivenClauseLoop, Verdict
from resprover.ml.config import SearchConfig, list_presets
from resprover.ml.logger import JSONLogger
from resprover.ml.weights import find_weights, load_into, save_network
from resprover.rules import ResolutionMode
from resprover.selectors import LearnedSelector, get_selector, list_selectors
from resprover.utils.config import get_config


logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Aggregated results of a prover run."""
    attempts: int = 0
    proved: int = 0
    rejected: int = 0
    failed_files: List[str] = field(default_factory=list)
    per_problem: Dict[str, Tuple[int, int]] = field(default_factory=dict)

    def record(self, problem: str, verdict: Verdict):
        self.attempts += 1
        proved, attempts = self.per_problem.get(problem, (0, 0))
        if verdict is Verdict.PROVED:
            self.proved += 1
            proved += 1
        else:
            self.rejected += 1
        self.per_problem[problem] = (proved, attempts + 1)

    def to_dict(self) -> dict:
        return {
            "attempts": self.attempts,
            "proved": self.proved,
            "rejected": self.rejected,
            "failed_files": self.failed_files,
            "per_problem": {name: {"proved": p, "attempts": a}
                            for name, (p, a) in self.per_problem.items()},
        }


def solve_problem(problem: Problem, config: SearchConfig,
                  temperature: Optional[float] = None,
                  seed: Optional[int] = None) -> Tuple[Verdict, GivenClauseLoop]:
    """Run one proof attempt with a fresh selector.

    ``seed`` replaces the configured selector seed for this attempt.
    """
    kwargs = config.selector_kwargs()
    if config.selector == "learned" and temperature is not None:
        kwargs["temperature"] = temperature
    if config.selector != "first" and seed is not None:
        kwargs["seed"] = seed
    selector = get_selector(config.selector, **kwargs)
    loop = GivenClauseLoop(problem, selector, ResolutionMode(config.resolution_mode))
    return loop.prove(), loop


def run(problems: ProblemSet, config: SearchConfig,
        json_logger: Optional[JSONLogger] = None,
        progress: bool = False) -> RunSummary:
    """Attempt every problem ``config.repeat`` times.

    For the learned selector the temperature starts at
    ``config.learned.temperature`` and grows by ``config.lambda_step`` after
    every attempt, across all problems.

    With a seed, one generator seeded from it hands every attempt its own
    selector seed, so repeated attempts differ while the run as a whole is
    reproducible.
    """
    summary = RunSummary()
    temperature = config.learned.temperature
    learning_state = (LearnedSelector.shared_state(config.learned.network)
                      if config.selector == "learned" else None)
    seen_updates = learning_state.updates if learning_state else 0
    base_seed = config.seed
    if base_seed is None and config.selector == "learned":
        base_seed = config.learned.seed
    seeds = random.Random(base_seed) if base_seed is not None else None

    pbar = tqdm(total=len(problems) * config.repeat, desc="Proving",
                disable=not progress)
    for idx, path in enumerate(problems.problem_files):
        try:
            problem = problems.get_problem(idx)
        except (OSError, ValueError) as e:
            logger.error("Could not read %s: %s", path, e)
            summary.failed_files.append(str(path))
            pbar.update(config.repeat)
            continue

        for attempt in range(config.repeat):
            start = time.time()
            seed = seeds.randrange(2 ** 32) if seeds is not None else None
            verdict, loop = solve_problem(problem, config, temperature, seed)
            summary.record(str(path), verdict)
            logger.debug("%s attempt %d: %s", path, attempt, verdict.value)

            if json_logger is not None:
                json_logger.log_attempt(
                    str(path), attempt, verdict.value, loop.stats.steps,
                    loop.stats.new_clauses, time.time() - start,
                    temperature if config.selector == "learned" else None)
                if learning_state is not None:
                    for update in range(seen_updates, learning_state.updates):
                        json_logger.log_training(update, learning_state.losses[update])
            if learning_state is not None:
                seen_updates = learning_state.updates
            temperature += config.lambda_step
            pbar.set_postfix(proved=summary.proved, rejected=summary.rejected)
            pbar.update(1)
    pbar.close()

    if learning_state is not None and learning_state.train() is not None:
        if json_logger is not None:
            json_logger.log_training(learning_state.updates - 1, learning_state.losses[-1])
    return summary


def build_config(args) -> SearchConfig:
    if args.config:
        config = SearchConfig.load(args.config)
    elif args.preset:
        config = SearchConfig.load_preset(args.preset)
    else:
        config = SearchConfig()

    if args.selector:
        config.selector = args.selector
    if args.steps is not None:
        config.steps_limit = args.steps
    if args.seed is not None:
        config.seed = args.seed
    if args.repeat is not None:
        config.repeat = args.repeat
    if args.temperature is not None:
        config.learned.temperature = args.temperature
    if args.lambda_step is not None:
        config.lambda_step = args.lambda_step
    if args.mode:
        config.resolution_mode = args.mode
    return config


def read_problems(args) -> ProblemSet:
    """Problems named on the command line, in a list file or on stdin."""
    if args.problems:
        return ProblemSet(files=args.problems)
    if args.list_file:
        return ProblemSet.from_list_file(args.list_file)
    if not sys.stdin.isatty():
        return ProblemSet.from_lines(sys.stdin)
    return ProblemSet()


def print_summary(summary: RunSummary, out=sys.stdout):
    for name, (proved, attempts) in summary.per_problem.items():
        status = "SUCCESS" if proved else "FAIL"
        print(f"{status:<8} {name} ({proved}/{attempts} proved)", file=out)
    for name in summary.failed_files:
        print(f"{'ERROR':<8} {name}", file=out)
    print(f"Proved {summary.proved} of {summary.attempts} attempts", file=out)


def main(argv=None):
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Prove DIMACS CNF problems by resolution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("problems", type=Path, nargs="*",
                        help="Problem files (default: read paths from stdin)")
    parser.add_argument("--files", dest="list_file", help="File listing problem paths")
    parser.add_argument("--selector", choices=list_selectors(), help="Clause selector")
    parser.add_argument("--preset", help="Use preset from configs/selectors/")
    parser.add_argument("--config", help="Search config YAML file")
    parser.add_argument("--list", action="store_true", help="List available presets")
    parser.add_argument("--steps", type=int, help="Step budget of budgeted selectors")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--repeat", type=int, help="Attempts per problem")
    parser.add_argument("--lambda", dest="temperature", type=float,
                        help="Initial temperature of the learned selector")
    parser.add_argument("--lambda-step", type=float,
                        help="Temperature increase per attempt")
    parser.add_argument("--mode", choices=[m.value for m in ResolutionMode],
                        help="Resolvent construction mode")
    parser.add_argument("--weights",
                        help="Load value network weights (file, or directory holding value*.npz)")
    parser.add_argument("--save-weights", help="Save value network weights after the run")
    parser.add_argument("--json", dest="json_run", help="Write run metrics under this run name")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--verbose", action="store_true", help="Show debug output")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.list:
        print("Available presets:")
        for name in list_presets():
            print(f"  {name}")
        return 0

    try:
        settings = get_config()
    except FileNotFoundError:
        settings = None

    config = build_config(args)
    problems = read_problems(args)
    if not len(problems):
        parser.error("no problem files given")

    if config.selector == "learned":
        network = LearnedSelector.shared_state(config.learned.network).network
        weights = args.weights or (settings.get_path("paths.weights") if settings else None)
        if weights and Path(weights).is_dir():
            weights = find_weights(Path(weights))
        if weights and Path(weights).exists():
            load_into(network, weights)
            logger.info("Loaded weights from %s", weights)

    json_logger = None
    if args.json_run:
        log_dir = (settings.get_path("paths.logs") if settings else None) or Path("logs")
        json_logger = JSONLogger(log_dir, args.json_run)
        json_logger.log_config(config.to_dict())

    start = time.time()
    summary = run(problems, config, json_logger, progress=args.progress)
    if json_logger is not None:
        json_logger.log_final(summary.to_dict(), time.time() - start)

    if args.save_weights and config.selector == "learned":
        path = save_network(LearnedSelector.shared_state().network, args.save_weights)
        logger.info("Saved weights to %s", path)

    print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
