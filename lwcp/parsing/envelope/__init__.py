from lwcp.parsing.envelope.decode import ENVELOPE_PATTERN, Envelope, flatten_lines, match_envelope

__all__ = ["ENVELOPE_PATTERN", "Envelope", "flatten_lines", "match_envelope"]
