"""
Visitor log sample application showcasing blazestore lists and sets.
"""

from .demo import bootstrap_host, recent_visitors, record_visit, run_demo

__all__ = ["bootstrap_host", "record_visit", "recent_visitors", "run_demo"]
