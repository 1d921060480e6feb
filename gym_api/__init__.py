"""Gym records API: members, gym classes and trainers."""
