"""
Low-level text scanning helpers shared by the LWCP decoders.

- ``text``: delimiter search, separator trimming, quote and bracket
  matching, and decimal number recognition.
"""
