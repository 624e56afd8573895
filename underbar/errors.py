class UnderbarError(Exception):
    """base class for every error raised by underbar itself"""


class UnsupportedCollectionError(UnderbarError, TypeError):
    """raised when a value is neither an indexed sequence nor a keyed mapping"""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"expected a sequence or a mapping, got {type(value).__name__}"
        )


class EmptyReductionError(UnderbarError, ValueError):
    """raised when reducing an empty collection without a seed"""

    def __init__(self):
        super().__init__("cannot reduce empty collection without seed")
