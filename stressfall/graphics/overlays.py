"""
overlays.py
-----------
Text content for the idle, game-over and victory overlays.

Each builder returns (title, message_lines, options). options["button"] tells
the render layer whether to offer "start" or "restart".
"""


def idle_overlay(duration: float):
    return (
        "🐕 Avoid the Finals Stress",
        [
            "Get Ready!",
            "Use ← → or click left/right to move your bulldog.",
            f"Survive {duration:.0f} seconds to become a CHAMPION! 🏆",
        ],
        {"button": "start", "state": "idle"},
    )


def game_over_overlay(session):
    survived = session.duration - session.time_left
    return (
        "😓 YOU LOSE!",
        [
            f"Final Score: {session.score}",
            f"Time Survived: {survived:.1f}s / {session.duration:.0f}s",
            "You couldn't pass the exam this time",
        ],
        {
            "button": "restart",
            "state": "gameOver",
            "score": session.score,
            "time_survived": survived,
            "duration": session.duration,
        },
    )


def victory_overlay(session):
    return (
        "🎉 VICTORY!",
        [
            f"Final Score: {session.score}",
            f"Time Survived: {session.duration:.0f}s / {session.duration:.0f}s",
            "You escaped the finals stress! 🐕",
        ],
        {
            "button": "restart",
            "state": "victory",
            "score": session.score,
            "time_survived": session.duration,
            "duration": session.duration,
        },
    )
