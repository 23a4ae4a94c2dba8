from enum import Enum, unique


@unique
class JobPriority(Enum):
    INTERACTIVE = "INTERACTIVE"
    BATCH = "BATCH"
