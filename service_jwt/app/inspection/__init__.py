"""
Token inspection package.

Shapes token engine results for the debugger endpoints:

- Decoding with claim evaluation against the server clock.
- Encoding with request-level defaults (algorithm, secret presence).
- Signature verification and algorithm listing.

The inspector owns the clock and the metrics; the engine stays pure.
"""
