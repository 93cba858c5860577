"""
Utility Module
Concurrency helpers shared by the data providers and the sentiment scorer.
"""

from .concurrency import gather_all_or_nothing, gather_all_settled

__all__ = ['gather_all_or_nothing', 'gather_all_settled']
