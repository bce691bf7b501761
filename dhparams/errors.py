class DHParamsError(Exception):
    """Base class for every failure raised by dhparams."""


class RandomSourceUnavailable(DHParamsError):
    """The secure entropy source could not deliver bytes."""


class GenerationExhausted(DHParamsError):
    def __init__(self, message: str, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


class SelectionExhausted(DHParamsError):
    def __init__(self, message: str, draws: int = 0):
        super().__init__(message)
        self.draws = draws
