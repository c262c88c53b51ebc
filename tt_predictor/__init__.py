"""
TT Predictor — Table-Tennis Total Points Estimation

Estimates the total points of a match from both players' last ten matches
and classifies it against the 74.5 line with a confidence score.
"""

__version__ = "0.1.0"
