"""Domain layer — numerals, quantities, durations, and text transforms.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""
