"""Level definitions and variants.

* :mod:`.config` holds the immutable per-level thresholds.
* :mod:`.loader` turns a serialized level definition into a config plus the
  initial :class:`collector_maze.state.MazeState`.
* :mod:`.subtypes` provides the level variants (plain maze, collector) that
  decide when and how a run is judged.
"""
