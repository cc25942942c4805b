"""
Reducer - Applies actions to a game session.

The reducer is the single point of state change for a match.
All actions go through apply_action().

Design principles:
- Pure function: (state, action) -> new state
- Validates before applying; on failure raises and the input is untouched
- Delegates round mechanics to rules.py
- Settles rounds and detects game over after every action
- Keeps one pre-action snapshot for undo
"""

from __future__ import annotations
import logging
import random
import uuid
from typing import Callable

from ..errors import (
    CrazyTensError,
    GameOver,
    MustAnswerChallengeFirst,
    NoPendingChallenge,
    NotYourTurn,
    WrongChallengeAnswer,
)
from ..systems import get_system
from .action import (
    ACTION_CLASSES,
    ActionResult,
    ActionType,
    AnswerChallengeAction,
    DrawAction,
    GameAction,
    PassAction,
    PlayAction,
    with_timestamp,
)
from .challenge import check_answer, generate_challenge
from .rules import (
    DEFAULT_HAND_SIZE,
    apply_draw,
    apply_play,
    init_round,
    is_round_over,
    opponent_of,
    pass_turn,
    round_winner,
)
from .scoring import round_gain
from .state import Card, GameState, GameStatus, RoundResult, RoundState

logger = logging.getLogger(__name__)


def create_game(
    players: tuple[str, str] | list[str],
    base_id: str,
    initial_hand_size: int = DEFAULT_HAND_SIZE,
    deck: list[Card] | None = None,
    game_id: str | None = None,
    random_seed: int | None = None,
) -> GameState:
    """
    Start a match with zero scores.

    Args:
        players: The two player ids; the first moves first
        base_id: Registered numeral system id ("dec", "doz")
        initial_hand_size: Cards dealt to each player every round
        deck: Optional stacked deck for the first round (back is drawn first)
        game_id: Optional id (generated if not provided)
        random_seed: Seed for reproducible shuffles and challenges
    """
    system = get_system(base_id)
    players = tuple(players)
    rng = random.Random(random_seed) if random_seed is not None else None
    round_state = init_round(system, players, initial_hand_size, deck=deck, rng=rng)

    game = GameState(
        game_id=game_id or f"g_{uuid.uuid4().hex[:12]}",
        system=system,
        round=round_state,
        scores={pid: 0 for pid in players},
        initial_hand_size=initial_hand_size,
        random_seed=random_seed,
    )
    logger.info(
        "Created game %s (%s) for %s and %s",
        game.game_id, system.id, players[0], players[1],
    )
    return game


def apply_action(game: GameState, action: GameAction) -> GameState:
    """
    Apply one action and return the next session snapshot.

    Raises a CrazyTensError subclass if the action is not allowed.
    """
    if game.is_over:
        raise GameOver(f"Game {game.game_id} is over")
    if not isinstance(action, ACTION_CLASSES):
        raise TypeError(f"Not a game action: {action!r}")

    action = with_timestamp(action)
    round_state = game.round
    challenge = round_state.pending_challenge

    # A pending challenge is addressed to whoever played the wildcard-ten
    if action.action_type is ActionType.ANSWER_CHALLENGE and challenge is not None:
        expected = challenge.player_id
    else:
        expected = round_state.turn
    if action.player_id != expected:
        raise NotYourTurn(f"Not {action.player_id}'s turn")

    if challenge is not None and action.action_type is not ActionType.ANSWER_CHALLENGE:
        raise MustAnswerChallengeFirst(
            f"{challenge.player_id} must answer {challenge.question(game.system)} first"
        )

    handler = _HANDLERS[action.action_type]
    new_round = handler(game, action)

    logger.debug("Game %s: applied %s by %s", game.game_id, action.action_type.value, action.player_id)

    next_game = game._copy_with(
        round=new_round,
        action_log=game.action_log + (action,),
        previous=game._copy_with(previous=None),
    )

    if is_round_over(new_round):
        next_game = _settle_round(next_game)
    return next_game


def try_apply(game: GameState, action: GameAction) -> ActionResult:
    """
    Apply an action, reporting engine errors in the result instead of raising.
    """
    try:
        new_state = apply_action(game, action)
    except CrazyTensError as e:
        return ActionResult.failure(str(e), error_code=e.code)
    return ActionResult.success_with_state(new_state, changes=describe_changes(game, new_state))


def undo(game: GameState) -> GameState:
    """Return the state before the last action, or the game itself."""
    return game.previous or game


def describe_changes(before: GameState, after: GameState) -> list[str]:
    """Human-readable summary of what the last action did."""
    if not after.action_log:
        return []
    action = after.action_log[-1]
    pid = action.player_id

    if isinstance(action, PlayAction):
        changes = [f"{pid} played {action.card}"]
        if action.chosen_suit is not None:
            changes.append(f"Suit is now {action.chosen_suit.value}")
    elif isinstance(action, DrawAction):
        changes = [f"{pid} drew a card"]
    elif isinstance(action, PassAction):
        changes = [f"{pid} passed"]
    else:
        changes = [f"{pid} answered the challenge"]

    challenge = after.round.pending_challenge
    if challenge is not None and before.round.pending_challenge is None:
        changes.append(f"Challenge for {challenge.player_id}: {challenge.question(after.system)}")
    if after.round_history != before.round_history:
        result = after.round_history[-1]
        changes.append(f"{result.winner} won round {result.round_number} (+{result.gain})")
    if after.is_over:
        changes.append(f"Game over, {after.winner} wins")
    elif after.round.turn != before.round.turn:
        changes.append(f"{after.round.turn} to move")
    return changes


# Handlers

def _handle_play(game: GameState, action: PlayAction) -> RoundState:
    system = game.system
    new_round = apply_play(system, game.round, action.player_id, action.card, action.chosen_suit)

    if action.card.rank == system.wildcard_ten_symbol and not is_round_over(new_round):
        challenge = generate_challenge(
            action.card.suit,
            player_id=action.player_id,
            resume_turn=opponent_of(new_round, action.player_id),
            rng=_rng_for(game, "challenge"),
        )
        new_round = new_round._copy_with(turn=action.player_id, pending_challenge=challenge)
    return new_round


def _handle_draw(game: GameState, action: DrawAction) -> RoundState:
    return apply_draw(game.system, game.round, action.player_id, rng=_rng_for(game, "draw"))


def _handle_pass(game: GameState, action: PassAction) -> RoundState:
    return pass_turn(game.round, action.player_id)


def _handle_answer(game: GameState, action: AnswerChallengeAction) -> RoundState:
    challenge = game.round.pending_challenge
    if challenge is None:
        raise NoPendingChallenge("There is no challenge to answer")
    if not check_answer(challenge, action.answer, game.system):
        raise WrongChallengeAnswer(
            f"{action.answer!r} is not the answer to {challenge.question(game.system)}"
        )
    return game.round._copy_with(
        pending_challenge=None,
        turn=challenge.resume_turn,
        draw_count=0,
    )


_HANDLERS: dict[ActionType, Callable[[GameState, GameAction], RoundState]] = {
    ActionType.PLAY: _handle_play,
    ActionType.DRAW: _handle_draw,
    ActionType.PASS: _handle_pass,
    ActionType.ANSWER_CHALLENGE: _handle_answer,
}


def _settle_round(game: GameState) -> GameState:
    """Score a finished round, then end the game or deal the next round."""
    system = game.system
    winner = round_winner(game.round)
    loser = opponent_of(game.round, winner)
    gain = round_gain(game.round.hand(loser), system)

    scores = game.scores.copy()
    scores[winner] = scores.get(winner, 0) + gain
    history = game.round_history + (
        RoundResult(round_number=game.round_number, winner=winner, loser=loser, gain=gain),
    )
    logger.info(
        "Game %s: %s won round %d, +%d (%s)",
        game.game_id, winner, game.round_number, gain, system.format(gain),
    )

    if any(score >= system.target_score for score in scores.values()):
        logger.info("Game %s over: %s wins with %d", game.game_id, winner, scores[winner])
        return game._copy_with(
            scores=scores,
            round_history=history,
            status=GameStatus.GAME_OVER,
            winner=winner,
        )

    new_round = init_round(
        system,
        game.players,
        game.initial_hand_size,
        rng=_rng_for(game, "deal"),
    )
    return game._copy_with(
        scores=scores,
        round_history=history,
        round=new_round,
        round_number=game.round_number + 1,
    )


def _rng_for(game: GameState, purpose: str) -> random.Random:
    """Randomness for one step; reproducible when the game has a seed."""
    if game.random_seed is None:
        return random.Random()
    return random.Random(f"{game.random_seed}:{len(game.action_log)}:{purpose}")
