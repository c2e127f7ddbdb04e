class ParseError(Exception):
    """Raised when a pasted row cannot be interpreted.

    The paste buffer is left untouched so the user can correct it and retry.
    """

    def __init__(self, reason: str, field_count: int = 0) -> None:
        self.reason = reason
        self.field_count = field_count
        super().__init__(reason)
