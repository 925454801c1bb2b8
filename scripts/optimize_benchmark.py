"""Minimize a benchmark function with one of the numopt optimizers."""

import argparse
import logging
from typing import Callable, Dict

import numpy as np

from numopt import Adam, GBestPSO, LBestPSO, Optimizer, Padam, StochasticGradientDescent
from numopt.callbacks import ProgressLogger
from numopt.exceptions import ConfigurationError
from numopt.functions import (
    AckleyFunction,
    BealeFunction,
    DifferentiableFunction,
    GeneralizedRosenbrockFunction,
    HimmelblauFunction,
    ObjectiveFunction,
    RosenbrockFunction,
    SphereFunction,
    ThreeHumpCamelFunction,
)
from numopt.utils.timer import Stopwatch


FUNCTIONS: Dict[str, Callable[[int], ObjectiveFunction]] = {
    "sphere": SphereFunction,
    "rosenbrock": lambda n: RosenbrockFunction(),
    "generalized-rosenbrock": GeneralizedRosenbrockFunction,
    "ackley": lambda n: AckleyFunction(),
    "beale": lambda n: BealeFunction(),
    "himmelblau": lambda n: HimmelblauFunction(),
    "three-hump-camel": lambda n: ThreeHumpCamelFunction(),
}

GRADIENT_OPTIMIZERS = ("padam", "adam", "sgd")
SWARM_OPTIMIZERS = ("lbest-pso", "gbest-pso")


def _initialize_optimizer(args: argparse.Namespace) -> Optimizer:
    if args.optimizer == "padam":
        return Padam(
            step_size=args.step_size,
            batch_size=args.batch_size,
            max_iterations=args.max_iterations,
            tolerance=args.tolerance,
            seed=args.seed,
        )
    if args.optimizer == "adam":
        return Adam(
            step_size=args.step_size,
            batch_size=args.batch_size,
            max_iterations=args.max_iterations,
            tolerance=args.tolerance,
            seed=args.seed,
        )
    if args.optimizer == "sgd":
        return StochasticGradientDescent(
            step_size=args.step_size,
            batch_size=args.batch_size,
            max_iterations=args.max_iterations,
            tolerance=args.tolerance,
            seed=args.seed,
        )
    pso = LBestPSO if args.optimizer == "lbest-pso" else GBestPSO
    return pso(
        num_particles=args.num_particles,
        lower_bound=args.lower_bound,
        upper_bound=args.upper_bound,
        max_iterations=args.max_iterations,
        seed=args.seed,
    )


def main(args: argparse.Namespace) -> None:
    """Entrypoint."""
    function = FUNCTIONS[args.function](args.dimensions)
    optimizer = _initialize_optimizer(args)
    coordinates = function.get_initial_point()

    print(f"Minimizing {args.function} with {type(optimizer).__name__}")
    print(f"  start:     {coordinates.flatten()}")

    with Stopwatch() as stopwatch:
        objective = optimizer.optimize(function, coordinates, ProgressLogger(log_every=args.log_every))

    print(f"  minimizer: {coordinates.flatten()}")
    print(f"  objective: {objective:.6g}")
    print(f"  elapsed:   {stopwatch.milliseconds_formatted}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Minimize a benchmark function.")
    parser.add_argument(
        "-f",
        "--function",
        type=str,
        required=False,
        default="rosenbrock",
        choices=sorted(FUNCTIONS),
        help="The benchmark function to minimize",
    )
    parser.add_argument(
        "-o",
        "--optimizer",
        type=str,
        required=False,
        default="padam",
        choices=GRADIENT_OPTIMIZERS + SWARM_OPTIMIZERS,
        help="The optimizer to run",
    )
    parser.add_argument(
        "-d",
        "--dimensions",
        type=int,
        required=False,
        default=2,
        help="The number of coordinates, for functions that take any number",
    )
    parser.add_argument(
        "-lr",
        "--step_size",
        type=float,
        required=False,
        default=0.01,
        help="The step size for the gradient-based optimizers",
    )
    parser.add_argument(
        "-bs",
        "--batch_size",
        type=int,
        required=False,
        default=32,
        help="The batch size for the gradient-based optimizers",
    )
    parser.add_argument(
        "-t",
        "--tolerance",
        type=float,
        required=False,
        default=1e-5,
        help="The change in epoch objective below which the gradient-based optimizers stop",
    )
    parser.add_argument(
        "-p",
        "--num_particles",
        type=int,
        required=False,
        default=64,
        help="The swarm size for the PSO optimizers",
    )
    parser.add_argument(
        "--lower_bound",
        type=float,
        required=False,
        default=-5.0,
        help="The lower bound of the initial swarm",
    )
    parser.add_argument(
        "--upper_bound",
        type=float,
        required=False,
        default=5.0,
        help="The upper bound of the initial swarm",
    )
    parser.add_argument(
        "-n",
        "--max_iterations",
        type=int,
        required=False,
        default=100_000,
        help="Samples (gradient-based) or iterations (PSO) to run before stopping; 0 means no limit",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        required=False,
        default=None,
        help="Seed for shuffling and swarm initialization",
    )
    parser.add_argument(
        "--log_every",
        type=int,
        required=False,
        default=100,
        help="Log progress every this many epochs",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also log the optimizers' per-iteration debug messages",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    np.set_printoptions(precision=6, suppress=True)

    function = FUNCTIONS[args.function](args.dimensions)
    if args.optimizer in GRADIENT_OPTIMIZERS and not isinstance(function, DifferentiableFunction):
        parser.error(f"{args.function} has no gradient; use one of {', '.join(SWARM_OPTIMIZERS)}")

    try:
        main(args)
    except ConfigurationError as e:
        parser.error(str(e))
