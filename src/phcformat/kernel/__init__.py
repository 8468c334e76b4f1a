"""Pure PHC codec kernel: grammar, base64 and parameter helpers, encoder, decoder."""
