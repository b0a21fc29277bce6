class CommandLine:
    """One line typed at the prompt, split on whitespace."""

    raw: str
    tokens: list[str]

    def __init__(self, raw: str):
        self.raw = raw.strip()
        self.tokens = self.raw.split()

    def is_empty(self) -> bool:
        return not self.tokens

    @property
    def name(self) -> str:
        return self.tokens[0] if self.tokens else ""

    @property
    def args(self) -> list[str]:
        return self.tokens[1:]
