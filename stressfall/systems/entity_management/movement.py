"""
movement.py
-----------
Per-tick movement for the character and the falling objects.

Responsibilities
----------------
- Step the character left/right from its movement intent.
- Clamp the character to the board.
- Drop each falling object by a speed derived from its frozen multiplier.

Steps are per tick and not scaled by delta time.
"""

from stressfall.entities.entity_state import MoveIntent


def descent_speed(speed_multiplier: float, speed_range) -> float:
    """
    Map a difficulty multiplier to pixels per tick.

    A multiplier of 1.0 maps to the base speed; each further 1.0 adds the
    full (max - base) span.
    """
    base_speed, max_speed = speed_range
    return base_speed + (max_speed - base_speed) * (speed_multiplier - 1)


class Mover:
    """Applies one tick of motion to the store's entities."""

    def __init__(self, config):
        self.board_width = config.board_width
        self.step = config.move_step
        self.speed_range = config.speed_range

    def move_character(self, character, intent=None):
        """Step toward the intent, then clamp into [0, board_width - width]."""
        if intent is None:
            intent = character.moving

        if intent is MoveIntent.LEFT and character.x > 0:
            character.x -= self.step
        elif intent is MoveIntent.RIGHT and character.x + character.width < self.board_width:
            character.x += self.step

        character.x = max(0.0, min(character.x, self.board_width - character.width))

    def move_objects(self, objects, speed_range=None):
        speed_range = speed_range or self.speed_range
        for obj in objects:
            obj.y += descent_speed(obj.speed_multiplier, speed_range)

    def advance(self, character, intent, objects, speed_range=None):
        """Move everything by one tick, mutating in place."""
        self.move_character(character, intent)
        self.move_objects(objects, speed_range)
