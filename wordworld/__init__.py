"""
WordWorld - Adaptive Vocabulary Learning Engine

Word selection, activity recommendation and session analytics for the
WordWorld children's vocabulary app, plus a thin client for its backend API.
"""

__version__ = "1.0.0"
__author__ = "WordWorld Contributors"
