from enum import Enum

class CompileStage(str, Enum):
    LOAD = "LOAD"
    REGISTER = "REGISTER"
    CLASSIFY = "CLASSIFY"
    EMIT = "EMIT"
    WRITE = "WRITE"

    def __str__(self) -> str:
        return self.value
