"""monoforge -- interactive client/server monorepo scaffolder."""

__version__ = "0.1.0"
