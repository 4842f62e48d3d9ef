from tcprobe.domain.enums.error_kind import ErrorKind
from tcprobe.domain.enums.result_field import ResultField, CANONICAL_ORDER
__all__ = [
    "ErrorKind",
    "ResultField",
    "CANONICAL_ORDER",
]
