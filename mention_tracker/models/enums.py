from enum import Enum


class LookupState(str, Enum):
    NOT_LOADED = "NOT_LOADED"
    LOADING = "LOADING"
    READY = "READY"
    FAILED = "FAILED"  # Terminal, a failed roster load is never retried
