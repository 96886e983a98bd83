"""
Legal ball resolution.

Decides which balls may be potted next from the state alone. Nothing here
mutates state; ScoringEngine consults it before every pot.
"""

from snooker.logic.balls import CLEARANCE_ORDER, COLOURS
from snooker.logic.enums import TERMINAL_PHASES, Ball, Phase
from snooker.logic.state import GameState

_NO_BALLS: frozenset[Ball] = frozenset()
_REDS_ONLY: frozenset[Ball] = frozenset({Ball.RED})


def is_sequence_context(state: GameState) -> bool:
    """True when the colours are being cleared in fixed order.

    Either the clearance sequence is in progress, or the reds are gone and
    the colour after the final red has already been resolved.
    """
    if state.phase == Phase.CLEARANCE_SEQUENCE:
        return True
    return state.reds_remaining == 0 and not state.last_red_colour_pending


def legal_balls(state: GameState) -> frozenset[Ball]:
    """
    Return the balls that may legally be potted next.

    Priority:
    1. foul pending or frame/match concluded: nothing
    2. clearance sequence: only the colour at clearance_index
    3. no reds left and no colour pending: same as 2 (sequence just began)
    4. awaiting red: red, while any remain
    5. awaiting colour: any colour
    """
    if state.phase == Phase.FOUL_PENDING or state.phase in TERMINAL_PHASES:
        return _NO_BALLS

    if is_sequence_context(state):
        return frozenset({CLEARANCE_ORDER[state.clearance_index]})

    if state.phase == Phase.AWAITING_RED:
        return _REDS_ONLY if state.reds_remaining > 0 else _NO_BALLS

    if state.phase == Phase.AWAITING_COLOUR:
        return COLOURS

    return _NO_BALLS


def is_legal(state: GameState, ball: Ball) -> bool:
    return ball in legal_balls(state)
