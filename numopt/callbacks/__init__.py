"""Callbacks fired by the optimizers at fixed points of a run."""

from .base import Callback, dispatch
from .early_stop import EarlyStopAtMinLoss
from .grad_clip import GradClipByNorm, GradClipByValue
from .print_loss import PrintLoss
from .progress import ProgressLogger
from .store_best import StoreBestCoordinates
from .timer_stop import TimerStop
