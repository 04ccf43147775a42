"""Domain models"""

from orgkit.domain.models.color import HslColor, RgbColor
from orgkit.domain.models.settled import SettledResult, SettleStatus

__all__ = ["HslColor", "RgbColor", "SettledResult", "SettleStatus"]
