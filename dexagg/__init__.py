"""
Core package for the DEX aggregator clients.

Import clients from ``dexagg.clients``; ``dexagg.settings`` and
``dexagg.logging`` hold the shared configuration and logger.
"""

__version__ = "0.1.0"
