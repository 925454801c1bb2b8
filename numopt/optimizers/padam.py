"""Implements the Padam optimizer."""

from typing import Any, Optional

from numopt.constants import Coordinates
from numopt.functions.base import DifferentiableFunction
from numopt.optimizers.base import Forwarded, Optimizer
from numopt.optimizers.sgd import StochasticGradientDescent
from numopt.policies import NoDecay, PadamUpdate


class Padam(Optimizer):
    """Partially adaptive momentum estimation (Padam): SGD driven by the Padam update rule.

    `max_iterations` counts visited terms of the separable objective, not epochs; 0 means no limit. The
    defaults are not tuned for any particular problem.
    """

    step_size = Forwarded("optimizer", "step_size")
    batch_size = Forwarded("optimizer", "batch_size")
    max_iterations = Forwarded("optimizer", "max_iterations")
    tolerance = Forwarded("optimizer", "tolerance")
    shuffle = Forwarded("optimizer", "shuffle")
    reset_policy = Forwarded("optimizer", "reset_policy")
    exact_objective = Forwarded("optimizer", "exact_objective")
    seed = Forwarded("optimizer", "seed")

    beta_1 = Forwarded("optimizer", "update_policy", "beta_1")
    beta_2 = Forwarded("optimizer", "update_policy", "beta_2")
    partial = Forwarded("optimizer", "update_policy", "partial")
    epsilon = Forwarded("optimizer", "update_policy", "epsilon")

    def __init__(
        self,
        step_size: float = 0.001,
        batch_size: int = 32,
        beta_1: float = 0.9,
        beta_2: float = 0.999,
        partial: float = 0.25,
        epsilon: float = 1e-8,
        max_iterations: int = 100000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        reset_policy: bool = True,
        exact_objective: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the optimizer."""
        self.optimizer = StochasticGradientDescent(
            step_size=step_size,
            batch_size=batch_size,
            max_iterations=max_iterations,
            tolerance=tolerance,
            shuffle=shuffle,
            update_policy=PadamUpdate(epsilon=epsilon, beta_1=beta_1, beta_2=beta_2, partial=partial),
            decay_policy=NoDecay(),
            reset_policy=reset_policy,
            exact_objective=exact_objective,
            seed=seed,
        )

    @property
    def update_policy(self) -> PadamUpdate:
        """The Padam update rule, including its moment estimates."""
        return self.optimizer.update_policy

    def optimize(self, function: DifferentiableFunction, iterate: Coordinates, *callbacks: Any) -> float:
        """Minimize `function` starting from `iterate`, which is overwritten with the final point."""
        return self.optimizer.optimize(function, iterate, *callbacks)
