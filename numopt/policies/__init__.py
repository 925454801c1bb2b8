"""Update rules and step size schedules used by the gradient-based optimizers."""

from .base import DecayPolicy, UpdatePolicy
from .adam import AdamUpdate
from .decay import ExponentialDecay, NoDecay
from .padam import PadamUpdate
from .vanilla import MomentumUpdate, VanillaUpdate
