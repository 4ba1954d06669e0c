class MalformedTimeString(ValueError):
    """Raised when a "HH:MM" string can not be parsed into hour and minute."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid time format: '{text}'")
