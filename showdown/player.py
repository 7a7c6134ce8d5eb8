"""Showdown participants."""

from dataclasses import dataclass, field

from showdown.cards import Card, format_cards


@dataclass(frozen=True)
class Player:
    """A player at showdown, holding two private cards.

    ``hole_cards`` is stored as a tuple so the hand handed out for display
    cannot be changed by the caller.
    """

    id: int
    hole_cards: tuple[Card, ...] = ()
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "hole_cards", tuple(self.hole_cards))
        if not self.name:
            object.__setattr__(self, "name", f"Player {self.id}")

    def __str__(self) -> str:
        return self.name

    def describe(self) -> str:
        return f"{self.name} [{format_cards(self.hole_cards)}]"
