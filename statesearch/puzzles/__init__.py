"""Example puzzles that implement the state contract."""

from statesearch.puzzles.towers import Towers, optimal_moves, is_valid_path

__all__ = ['Towers', 'optimal_moves', 'is_valid_path']
