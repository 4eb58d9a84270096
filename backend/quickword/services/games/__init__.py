"""Round timing and guess judging for whatever front end shows the game.

Nothing here touches the engine or the clock except `rounds.now_ms`.
"""
