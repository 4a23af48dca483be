"""
Solver for the radioisotope elevator puzzle.
"""
