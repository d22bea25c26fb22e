#!/usr/bin/env python3
import json
import sys
from decimal import Decimal, ROUND_HALF_UP

PLAYERS = ["Matt", "Seth", "Mack", "Arnav", "Henry"]

BIG_GAME_THRESHOLD = 4
RECENT_FORM_WINDOW = 15

METRIC_DEFINITIONS = {
    'win_rate': "The percentage of games a player won out of all games they participated in. "
                "A score above 50 means you win more than you lose.",
    'ppg': "Profit Per Game. The average dollar amount earned (or lost) per game played. "
           "Accounts for how many games each player actually showed up for.",
    'sets_ratio': "Sets Received divided by Sets Paid Out. A ratio above 1.0 means you collected "
                  "more sets than you gave away.",
    'avg_win_size': "The average dollar value of a winning hand.",
    'loss_control': "How small your average loss is when you do lose. Scaled from $2 (best, scores 100) "
                    "to $6 (worst, scores 0); a $4 average sits at neutral 50.",
    'big_game_rate': "The percentage of your games where the result (win or loss) was $4 or more.",
    'recent_form': "Your win rate over your last 15 games only.",
    'clutch_rate': "Your win rate specifically in games where $4 or more was on the line.",
}


def _clamp(value):
    return min(100, max(0, value))


# key -> (label, description, stats field, scale)
RADAR_METRICS = {
    'win_rate': ("Win Rate", "50% = break-even  |  0-100%",
                 'win_rate', _clamp),
    'ppg': ("PPG", "$0/game = 50  |  range +/-$2",
            'ppg', lambda v: _clamp(((v + 2) / 4) * 100)),
    'sets_ratio': ("Sets Ratio", "1.0x = balanced (50)  |  range 0-2x",
                   'sets_ratio', lambda v: _clamp((v / 2) * 100)),
    'avg_win_size': ("Avg Win Size", "$0 = 0  |  $4+ = 100",
                     'avg_win_size', lambda v: _clamp((v / 4) * 100)),
    'loss_control': ("Loss Control", "$2 avg loss = 100  |  $6 avg loss = 0",
                     'avg_loss_size', lambda v: _clamp(((6 - v) / 4) * 100)),
    'big_game_rate': ("Big Game Rate", "% of games with $4+ result  |  0-100%",
                      'big_game_rate', _clamp),
    'recent_form': ("Recent Form", "Win rate last 15 games  |  50% = break-even",
                    'recent_form', _clamp),
    'clutch_rate': ("Clutch Rate", "Win rate in $4+ games  |  50% = break-even",
                    'clutch_rate', _clamp),
}

DEFAULT_RADAR_METRICS = ['win_rate', 'ppg', 'sets_ratio', 'recent_form', 'clutch_rate']
MIN_RADAR_METRICS = 3
MAX_RADAR_METRICS = 7


def round_half_up(value, places):
    """
    Round half away from zero to a fixed number of decimal places.

    The builtin round() uses banker's rounding on binary floats, which gives
    2.675 -> 2.67; the stats table always rounds the decimal text instead.
    """
    quantum = Decimal(1).scaleb(-places)
    result = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(result)


def _ratio(numerator, denominator, places, scale=1):
    if not denominator:
        return 0
    return round_half_up((numerator / denominator) * scale, places)


def calc_player_stats(games, player):
    """
    Aggregate one player's results across the game list.

    Games where the player's result is None are skipped. A result of exactly
    zero counts as played but as neither a win nor a loss.
    """
    played = [g[player] for g in games if g.get(player) is not None]
    wins = [r for r in played if r > 0]
    losses = [r for r in played if r < 0]

    winnings = sum(wins)
    loss_amount = sum(losses)
    net = winnings + loss_amount

    # Spreadsheet convention: paid = ABS(losses + lost*2), received = ABS(winnings - won*2)
    sets_paid = abs(loss_amount + len(losses) * 2)
    sets_received = abs(winnings - len(wins) * 2)

    big_games = [r for r in played if abs(r) >= BIG_GAME_THRESHOLD]
    big_wins = [r for r in big_games if r > 0]
    recent = played[-RECENT_FORM_WINDOW:]
    recent_wins = [r for r in recent if r > 0]

    return {
        'played': len(played),
        'won': len(wins),
        'lost': len(losses),
        'winnings': winnings,
        'loss_amount': loss_amount,
        'net': net,
        'ppg': _ratio(net, len(played), 2),
        'sets_paid': sets_paid,
        'sets_received': sets_received,
        'sets_ratio': _ratio(sets_received, sets_paid, 3),
        'avg_win_size': _ratio(winnings, len(wins), 2),
        'avg_loss_size': _ratio(abs(loss_amount), len(losses), 2),
        'big_game_rate': _ratio(len(big_games), len(played), 1, scale=100),
        'recent_form': _ratio(len(recent_wins), len(recent), 1, scale=100),
        'clutch_rate': _ratio(len(big_wins), len(big_games), 1, scale=100),
        'win_rate': _ratio(len(wins), len(played), 1, scale=100),
    }


def get_player_stats(games):
    """Calculate the stats table for every player, keyed by name"""
    return {player: calc_player_stats(games, player) for player in PLAYERS}


def get_cumulative_net(games):
    """
    Running net profit per player after each game.

    Returns one row per game, in order, e.g. {'game': 3, 'Matt': 4, ...}.
    A player who sat out a game keeps the previous total.
    """
    running = {player: 0 for player in PLAYERS}
    history = []

    for i, game in enumerate(games, 1):
        for player in PLAYERS:
            result = game.get(player)
            if result is not None:
                running[player] = round_half_up(running[player] + result, 2)
        row = {'game': i}
        row.update(running)
        history.append(row)

    return history


def get_win_rate_data(stats):
    return [{'name': p, 'win_rate': stats[p]['win_rate']} for p in PLAYERS]


def get_record_data(stats):
    return [{'name': p, 'wins': stats[p]['won'], 'losses': stats[p]['lost']} for p in PLAYERS]


def get_financial_data(stats):
    return [
        {
            'name': p,
            'winnings': stats[p]['winnings'],
            'losses': stats[p]['loss_amount'],
            'net': stats[p]['net'],
            'ppg': stats[p]['ppg'],
        }
        for p in PLAYERS
    ]


def get_sets_data(stats):
    """Sets received vs paid, with the balance (positive = net set collector)"""
    return [
        {
            'name': p,
            'sets_received': stats[p]['sets_received'],
            'sets_paid': stats[p]['sets_paid'],
            'balance': stats[p]['sets_received'] - stats[p]['sets_paid'],
        }
        for p in PLAYERS
    ]


def get_scatter_data(stats):
    """Win rate (x) against profit per game (y), sized by games played (z)"""
    return [
        {'name': p, 'x': stats[p]['win_rate'], 'y': stats[p]['ppg'], 'z': stats[p]['played']}
        for p in PLAYERS
    ]


def get_radar_data(stats, metrics=None):
    """
    Scale selected metrics onto a 0-100 radar where 50 is break-even.

    Args:
        stats: Output of get_player_stats
        metrics: Metric keys to include; defaults to DEFAULT_RADAR_METRICS

    Raises:
        ValueError: Unknown metric key, or fewer than 3 / more than 7 metrics
    """
    if metrics is None:
        metrics = DEFAULT_RADAR_METRICS

    unknown = [m for m in metrics if m not in RADAR_METRICS]
    if unknown:
        raise ValueError(f"Unknown radar metric(s): {', '.join(unknown)}")

    active = list(dict.fromkeys(metrics))
    if not MIN_RADAR_METRICS <= len(active) <= MAX_RADAR_METRICS:
        raise ValueError(
            f"Choose between {MIN_RADAR_METRICS} and {MAX_RADAR_METRICS} radar metrics "
            f"(got {len(active)})"
        )

    rows = []
    # Keep the canonical metric order regardless of selection order
    for key, (label, description, field, scale) in RADAR_METRICS.items():
        if key not in active:
            continue
        real = {p: stats[p][field] for p in PLAYERS}
        rows.append({
            'metric': label,
            'key': key,
            'description': description,
            'scaled': {p: scale(v) for p, v in real.items()},
            'real': real,
        })
    return rows


def get_all_statistics(games):
    """
    Get all statistics in one call

    Args:
        games: Ordered game list as held by the game store
    """
    stats = get_player_stats(games)

    return {
        'total_games': len(games),
        'players': PLAYERS,
        'player_stats': stats,
        'cumulative_net': get_cumulative_net(games),
        'win_rate_data': get_win_rate_data(stats),
        'record_data': get_record_data(stats),
        'financial_data': get_financial_data(stats),
        'sets_data': get_sets_data(stats),
        'scatter_data': get_scatter_data(stats),
        'radar': get_radar_data(stats),
    }


def main(argv=None):
    """Command-line entry point: print all statistics for a game file as JSON"""
    from game_store import DEFAULT_GAMES_FILE, load_games

    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else DEFAULT_GAMES_FILE

    # Read-only: a missing file is reported as an empty season, never created
    games = load_games(path, seed=False, create=False)
    print(json.dumps(get_all_statistics(games), indent=2))


if __name__ == "__main__":
    main()
