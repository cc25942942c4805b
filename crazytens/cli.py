"""
Crazy Tens CLI - Command-line interface for the engine.

Usage:
    crazytens play [--base doz] [--hand-size 5] [--seed N]   Hot-seat game for two players
    crazytens convert VALUE --base doz [--to-decimal | --from-decimal]
    crazytens systems                                        List numeral systems
"""

import argparse
import logging
import sys

from . import config
from .errors import CrazyTensError
from .engine_core.action import AnswerChallengeAction, DrawAction, PassAction, PlayAction
from .engine_core.reducer import create_game, try_apply, undo
from .engine_core.rules import DRAW_LIMIT, playable_cards
from .engine_core.scoring import score_breakdown
from .engine_core.state import Card, GameState, Suit
from .systems import NumeralSystem, available_systems, get_system

PLAYERS = ("P1", "P2")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Crazy Tens - a discard card game in any numeral system",
        prog="crazytens",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Start a hot-seat game for two players")
    play_parser.add_argument("--base", default=config.DEFAULT_BASE, help="Numeral system id")
    play_parser.add_argument("--hand-size", type=int, default=config.DEFAULT_HAND_SIZE)
    play_parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED)

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert a number between bases")
    convert_parser.add_argument("value", help="Number to convert")
    convert_parser.add_argument("--base", default=config.DEFAULT_BASE, help="Numeral system id")
    direction = convert_parser.add_mutually_exclusive_group()
    direction.add_argument("--to-decimal", action="store_true", help="VALUE is in --base (default)")
    direction.add_argument("--from-decimal", action="store_true", help="VALUE is decimal")

    # Systems command
    subparsers.add_parser("systems", help="List numeral systems")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.WARNING))

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "convert":
        return cmd_convert(args)
    elif args.command == "systems":
        return cmd_systems(args)
    else:
        parser.print_help()
        return 1


def cmd_convert(args):
    """Convert a number between decimal and a numeral system."""
    try:
        system = get_system(args.base)
        if args.from_decimal:
            print(system.format(int(args.value)))
        else:
            print(system.parse(args.value))
    except (CrazyTensError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    return 0


def cmd_systems(args):
    """List numeral systems."""
    for base_id in available_systems():
        system = get_system(base_id)
        print(
            f"{system.id}: {system.name} (base {system.spec.radix}), "
            f"{system.full_deck_size} cards, target {system.target_score_text} "
            f"(dec {system.target_score})"
        )
    return 0


def cmd_play(args, input_fn=input):
    """Run an interactive hot-seat game."""
    try:
        game = create_game(PLAYERS, args.base, initial_hand_size=args.hand_size, random_seed=args.seed)
    except CrazyTensError as e:
        print(f"Error: {e}")
        return 1

    print(f"Crazy Tens ({game.system.name}). Type 'help' for commands.")
    while not game.is_over:
        render_turn(game)
        try:
            line = input_fn(f"{game.round.turn}> ").strip()
        except EOFError:
            return 0
        if not line:
            continue

        cmd, *rest = line.split()
        cmd = cmd.lower()
        if cmd in ("quit", "exit"):
            return 0
        if cmd in ("help", "h", "?"):
            print_help(game.system)
            continue
        if cmd == "hand":
            for pid in PLAYERS:
                print(f"{pid} ({len(game.round.hand(pid))}): {' '.join(map(str, game.round.hand(pid)))}")
            continue
        if cmd == "undo":
            game = undo(game)
            continue

        try:
            action = parse_command(game, cmd, rest)
        except ValueError as e:
            print(f"Error: {e}")
            continue

        result = try_apply(game, action)
        if not result.success:
            print(f"Error: {result.error_code}: {result.error}")
            continue

        if result.new_state.round_history != game.round_history:
            print_settlement(game, result.new_state)
        for change in result.state_changes:
            print(f"  {change}")
        game = result.new_state

    print("=== GAME OVER ===")
    print(f"Winner: {game.winner}")
    print("Final scores: " + ", ".join(
        f"{pid}={game.system.format(score)} (dec {score})" for pid, score in game.scores.items()
    ))
    return 0


def parse_command(game: GameState, cmd: str, rest: list[str]):
    """Turn a command line into an engine action. Raises ValueError."""
    pid = game.round.turn
    if cmd == "draw":
        return DrawAction(pid)
    if cmd == "pass":
        return PassAction(pid)
    if cmd == "answer":
        if not rest:
            raise ValueError("usage: answer <number>")
        challenge = game.round.pending_challenge
        return AnswerChallengeAction(challenge.player_id if challenge else pid, rest[0])
    if cmd == "play":
        if not rest:
            raise ValueError("usage: play <rank><suit> [chosen suit]")
        card = parse_card(rest[0], game.system)
        chosen = Suit.parse(rest[1]) if len(rest) > 1 else None
        return PlayAction(pid, card, chosen)
    raise ValueError(f"Unknown command: {cmd}")


def parse_card(token: str, system: NumeralSystem) -> Card:
    """Read a card written as rank then suit letter, e.g. 10H, ↊S, AS (dozenal alias)."""
    token = token.strip()
    if len(token) < 2:
        raise ValueError(f"Not a card: {token!r}")
    suit = Suit.parse(token[-1])
    rank = token[:-1].upper()
    if rank not in system.rank_symbols:
        # Aliased numerals, e.g. A -> ↊ in dozenal
        try:
            rank = system.format(system.parse(rank))
        except CrazyTensError:
            raise ValueError(f"Unknown rank: {token[:-1]!r}") from None
        if rank not in system.deck_numeric_symbols:
            raise ValueError(f"Unknown rank: {token[:-1]!r}")
    return Card(suit, rank)


def render_turn(game: GameState):
    round_state = game.round
    turn = round_state.turn
    top = f"{round_state.top_card}"
    if round_state.forced_suit:
        top += f" | forced suit: {round_state.forced_suit.value}"
    print("")
    print(f"Round {game.round_number} | Base: {game.system.id} | Turn: {turn}")
    print(f"Top card: {top}")
    print("Scores: " + ", ".join(f"{pid}={game.system.format(s)}" for pid, s in game.scores.items()))

    challenge = round_state.pending_challenge
    if challenge is not None:
        print(f"CHALLENGE for {challenge.player_id}: {challenge.question(game.system)} = ?")
        return

    if round_state.free_play_for == turn:
        print("FREE PLAY: you may play any card.")
    print(f"Draws this turn: {round_state.draw_count}/{DRAW_LIMIT}")
    print(f"{turn} hand: {' '.join(map(str, round_state.hand(turn)))}")
    if not playable_cards(game.system, round_state, turn):
        print("Hint: nothing playable. Try 'draw' or 'pass'.")


def print_settlement(before: GameState, after: GameState):
    """Show how the loser's remaining hand adds up."""
    result = after.round_history[-1]
    system = after.system
    print(f"{result.winner} emptied their hand. Remaining cards of {result.loser}:")
    previous = 0
    for line in score_breakdown(before_loser_hand(before, after), system):
        print(
            f"  {system.format(previous)} + {system.format(line.points)} ({line.card}) "
            f"= {system.format(line.running_total)}"
        )
        previous = line.running_total
    print(f"Gain: {system.format(result.gain)} (dec {result.gain})")


def before_loser_hand(before: GameState, after: GameState) -> tuple[Card, ...]:
    """The loser's hand as it stood when the round ended."""
    loser = after.round_history[-1].loser
    if after.is_over:
        return after.round.hand(loser)
    # A new round was dealt; the last action was a play by the winner,
    # so the loser's hand is unchanged from before it.
    return before.round.hand(loser)


def print_help(system: NumeralSystem):
    print(f"""
Commands:
  play <RS> [S|H|D|C]   play a card by rank+suit, e.g. play 2H, play JS
                        the wildcard-ten ({system.wildcard_ten_symbol}) needs a chosen suit: play {system.wildcard_ten_symbol}H D
                        the wildcard-skip ({system.wildcard_skip_symbol}) lets you play again, freely
  draw                  draw a card (max {DRAW_LIMIT} per turn)
  pass                  pass the turn
  answer <n>            answer a pending challenge (in {system.name} numerals)
  undo                  take back the last action
  hand                  show BOTH hands (hot-seat debug)
  help                  show this help
  quit                  exit
""")


if __name__ == "__main__":
    sys.exit(main())
