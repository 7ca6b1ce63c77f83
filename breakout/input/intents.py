"""
Input Intents - The player's actions for one frame.

Raw key polling lives in the input sources; the simulation core only
sees these frame-scoped intents. Uses Pydantic for validation and
immutability.
"""
from pydantic import BaseModel, ConfigDict, model_validator


class InputIntents(BaseModel):
    """Immutable set of player intents for a single frame.

    Attributes:
        move_left: Slide the paddle left
        move_right: Slide the paddle right
        quit: End the session
        clear_bricks: Debug command: destroy every brick outside the first row
    """
    move_left: bool = False
    move_right: bool = False
    quit: bool = False
    clear_bricks: bool = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_single_direction(self) -> 'InputIntents':
        """Reject frames that ask to move both ways."""
        if self.move_left and self.move_right:
            raise ValueError('move_left and move_right are mutually exclusive')
        return self

    @property
    def horizontal(self) -> int:
        """Horizontal intent as -1 (left), 0 (none) or +1 (right)."""
        if self.move_right:
            return 1
        if self.move_left:
            return -1
        return 0

    def __str__(self) -> str:
        """String representation for debugging."""
        flags = [name for name in ('move_left', 'move_right', 'quit', 'clear_bricks')
                 if getattr(self, name)]
        return f"InputIntents({', '.join(flags) or 'idle'})"


NO_INPUT = InputIntents()
