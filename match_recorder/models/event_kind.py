"""
Event categories and team sides for the Live Match Recorder.

``EventKind`` is a closed set; everything the session needs to know about a
kind (display label, default description, score effect) is derived from the
tag here rather than branched on at call sites.
"""
from enum import Enum


class Side(Enum):
    """Which of the two teams an event belongs to."""
    HOME = "home"
    AWAY = "away"

    @classmethod
    def parse(cls, value) -> "Side":
        """
        Resolve a side from its tag string (case-insensitive).

        Raises:
            ValueError: If ``value`` is not ``home`` or ``away``
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown side: {value!r}") from None


class EventKind(Enum):
    """Recordable in-game event categories, in canonical display order."""
    GOAL = "goal"
    SUBSTITUTION = "substitution"
    RED_CARD = "red_card"
    FINAL_THIRD_ENTRY = "final_third_entry"
    OPEN_PLAY_FIRST_CONTACT = "open_play_first_contact"
    OPEN_PLAY_SECOND_CONTACT = "open_play_second_contact"
    SET_PIECE_FIRST_CONTACT = "set_piece_first_contact"
    SET_PIECE_SECOND_CONTACT = "set_piece_second_contact"
    PASS_INTO_SEAM_3 = "pass_into_seam_3"
    ATTACK_WON = "attack_won"
    ATTACK_LOST = "attack_lost"

    @classmethod
    def parse(cls, value) -> "EventKind":
        """
        Resolve a kind from its tag string (case-insensitive).

        Raises:
            ValueError: If ``value`` is not a known tag
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown event kind: {value!r}") from None

    @property
    def label(self) -> str:
        """Short button label for the kind."""
        return KIND_LABELS[self]

    @property
    def default_description(self) -> str:
        """Description recorded when the caller supplies none."""
        return self.value.replace("_", " ").upper()

    @property
    def increments_score(self) -> bool:
        """True iff recording this kind changes the score."""
        return self is EventKind.GOAL


KIND_LABELS = {
    EventKind.GOAL: "Goal",
    EventKind.SUBSTITUTION: "Substitution",
    EventKind.RED_CARD: "Red Card",
    EventKind.FINAL_THIRD_ENTRY: "Final 3rd Entry",
    EventKind.OPEN_PLAY_FIRST_CONTACT: "1st Contact",
    EventKind.OPEN_PLAY_SECOND_CONTACT: "2nd Contact",
    EventKind.SET_PIECE_FIRST_CONTACT: "Set Piece 1st Contact",
    EventKind.SET_PIECE_SECOND_CONTACT: "Set Piece 2nd Contact",
    EventKind.PASS_INTO_SEAM_3: "Pass Seam 3",
    EventKind.ATTACK_WON: "Attack Won",
    EventKind.ATTACK_LOST: "Attack Lost",
}
