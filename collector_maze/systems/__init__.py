"""Gameplay systems.

Pure ``MazeState -> MazeState`` transforms applied by
:func:`collector_maze.step.step`. Outcome evaluation never calls these; it
only reads the state they produce.
"""
