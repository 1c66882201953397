class InputExhaustedError(EOFError):
    """The input source closed before an acceptable value was entered."""

    def __init__(self, *, prompt: str, n_attempts: int) -> None:
        super().__init__(
            f"Input exhausted after {n_attempts} attempt(s) while waiting for: {prompt!r}"
        )
        self.prompt = prompt
        self.n_attempts = n_attempts
