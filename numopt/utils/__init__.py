"""Shared utilities."""

from .arrays import broadcast_bound
from .timer import Stopwatch
