"""
Numeral Words: spell arbitrary-precision numbers as words in many languages.

Architecture: Normalizer → Orchestrator → Greedy or Segment engine → Cleanup
Philosophy:  Languages are data plus small hooks. Engines never know grammar.
"""

__version__ = "1.0.0"
