"""Whose move is it?"""

from dataclasses import dataclass

from src.core.shared_types import Color


@dataclass
class Turn:
    color: Color = Color.WHITE

    def get_opposite_color(self) -> Color:
        return self.color.opposite

    def change(self) -> None:
        self.color = self.color.opposite

    def __str__(self) -> str:
        return f"{self.color.value} to move"
