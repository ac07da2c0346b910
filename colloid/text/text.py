from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open span `[start, end)` of a token in its source.

    Offsets index the source `str` directly, so they count characters, not
    encoded bytes. `source[start:end]` is the token's lexeme.
    """

    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end:
            raise ValueError(f"Invalid text range [{self.start}, {self.end})")

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)
