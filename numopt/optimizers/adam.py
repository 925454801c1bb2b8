"""Implements the Adam optimizer."""

from typing import Any, Optional

from numopt.constants import Coordinates
from numopt.functions.base import DifferentiableFunction
from numopt.optimizers.base import Forwarded, Optimizer
from numopt.optimizers.sgd import StochasticGradientDescent
from numopt.policies import AdamUpdate, NoDecay


class Adam(Optimizer):
    """Implements the Adam optimizer: SGD driven by the Adam update rule."""

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
    epsilon = Forwarded("optimizer", "update_policy", "epsilon")

    def __init__(
        self,
        step_size: float = 0.001,
        batch_size: int = 32,
        beta_1: float = 0.9,
        beta_2: float = 0.999,
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
            update_policy=AdamUpdate(epsilon=epsilon, beta_1=beta_1, beta_2=beta_2),
            decay_policy=NoDecay(),
            reset_policy=reset_policy,
            exact_objective=exact_objective,
            seed=seed,
        )

    def set_learning_rate(self, lr: float) -> None:
        """Update the step size."""
        self.step_size = lr

    def optimize(self, function: DifferentiableFunction, iterate: Coordinates, *callbacks: Any) -> float:
        """Minimize `function` starting from `iterate`, which is overwritten with the final point."""
        return self.optimizer.optimize(function, iterate, *callbacks)
