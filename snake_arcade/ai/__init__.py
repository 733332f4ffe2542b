"""
AI Module for the Snake Arcade

Greedy one-step mover shared by the self-playing snake and the competitive bot.
"""

from .greedy import choose_move, safe_moves

__all__ = ['choose_move', 'safe_moves']
