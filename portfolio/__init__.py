"""
Portfolio data aggregator: GitHub profile, repositories, README and n8n workflows.
"""

__version__ = "0.1.0"
