from .caribbean_airlines import CaribbeanAirlinesCarrier
from .delta_cargo import DeltaCargoCarrier
