"""Response envelopes and error schemas."""
