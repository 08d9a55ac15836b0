import enum
import logging

logger: logging.Logger = logging.getLogger("pratt_calc")
logger.addHandler(logging.StreamHandler())
logger.setLevel(logging.CRITICAL)


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__
