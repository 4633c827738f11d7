"""Scripted campfire rescue scene (no combat)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Tuple

RescueChoice = Literal["help", "shout"]

ATTEMPTS_TO_RESCUE = 3

OPENING_BEATS: Tuple[Tuple[str, ...], ...] = (
    (
        "Marcus is absolutely destroying this rock. Pebbles everywhere.",
        "His knuckles are bleeding. The rock is 50% dust now. He's not stopping.",
    ),
    (
        "The rock is now gravel. Marcus raises his arms in triumph.",
        '"Victory..." he says calmly and monotone to the heavens.',
        "Then... he looks at the campfire.",
    ),
    (
        '"The rock... it made me do terrible things," Marcus says.',
        '"There\'s only one way to cleanse this guilt..."',
        "Before you can stop him, in the calmest, slowest, most unnecessary rage, "
        "he dives face first directly into the campfire.",
    ),
)

SITUATION_LINES: Tuple[Tuple[str, ...], ...] = (
    (
        "Marcus is rolling around in the fire, screaming for help.",
        "The flames are everywhere. This is a disaster.",
    ),
    (
        "Marcus is still in the fire. He's doing this weird flailing thing.",
        "Is he... is he swimming in the fire? That's not helping, Marcus.",
    ),
    (
        "Marcus has given up flailing. He's just lying there dramatically.",
        "But he's still saying Robert. So at least he's alive.",
    ),
)

PLEAS: Tuple[str, ...] = (
    '"Help me... Robert..."',
    '"Robert... This hurts worse than stubbing my toe on that rock."',
    '"Robert... Why did you allow me to yeet myself into this fire?"',
    '"Robert... This fire is pissing me off."',
)

FAILED_HELP_LINES: Tuple[str, ...] = (
    "You reach toward the fire to help Marcus!",
    "But the heat is too intense! You pull back, singed.",
    "Marcus continues writhing in the flames.",
)

RESCUE_LINES: Tuple[str, ...] = (
    "With a heroic burst of determination, you grab a nearby branch!",
    "You extend it to Marcus. He grabs hold!",
    "With a mighty heave, you YANK Marcus out of the fire!",
    "He tumbles onto the ground, smoking and coughing.",
    "Marcus looks up at you with tears in his eyes.",
    '"That rock... it was so smug, Robert. So smug."',
    "You help him to his feet. His hair is mostly gone.",
    '"We don\'t talk about this," you say firmly.',
    '"Agreed," Marcus nods. "What rock?"',
)


@dataclass(slots=True)
class RescueScene:
    """State for one playthrough of the rescue scene."""

    help_attempts: int = 0
    transcript: List[str] = field(default_factory=list)

    @property
    def is_rescued(self) -> bool:
        return self.help_attempts >= ATTEMPTS_TO_RESCUE

    def opening_beats(self) -> Tuple[Tuple[str, ...], ...]:
        return OPENING_BEATS

    def situation_lines(self) -> List[str]:
        """Describe the fire at the current attempt, ending with Marcus's plea."""
        index = min(self.help_attempts, len(SITUATION_LINES) - 1)
        return [*SITUATION_LINES[index], f"Marcus: {self.current_plea()}"]

    def current_plea(self) -> str:
        return PLEAS[min(self.help_attempts, len(PLEAS) - 1)]

    def choose(self, choice: RescueChoice) -> List[str]:
        if choice == "help":
            return self.help()
        if choice == "shout":
            return self.shout()
        raise ValueError(f"Unknown rescue choice '{choice}'.")

    def help(self) -> List[str]:
        if self.is_rescued:
            raise ValueError("Marcus has already been rescued.")
        self.help_attempts += 1
        lines = list(RESCUE_LINES if self.is_rescued else FAILED_HELP_LINES)
        self.transcript.extend(lines)
        return lines

    def shout(self) -> List[str]:
        """Yelling at Marcus never gets him out, it only repeats his plea."""
        if self.is_rescued:
            raise ValueError("Marcus has already been rescued.")
        lines = [
            '"Marcus, just GET OUT!" you yell.',
            "Marcus looks at you from the flames.",
            f"Marcus: {self.current_plea()}",
            "Yeah, that's not working.",
        ]
        self.transcript.extend(lines)
        return lines
