"""Scripted policies for the starship environment"""

from .policies import DodgePolicy, RandomPolicy, make_policy

__all__ = ['DodgePolicy', 'RandomPolicy', 'make_policy']
