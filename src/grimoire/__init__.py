"""Grimoire - a Storyteller's assistant for running social deduction game nights."""

__version__ = "0.1.0"
