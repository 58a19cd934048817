class MorseError(ValueError):
    """Base class for input the codec refuses to translate."""


class UnsupportedCharacterError(MorseError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unsupported character {char!r} at position {position}")


class MalformedTokenError(MorseError):
    def __init__(self, token: str, position: int, reason: str = "no matching letter"):
        self.token = token
        self.position = position
        self.reason = reason
        super().__init__(f"Malformed token {token!r} at position {position}: {reason}")
